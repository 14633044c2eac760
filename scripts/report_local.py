#!/usr/bin/env python3
"""
Local report harness (no HTTP).

Usage:
  python3 scripts/report_local.py

Seeds the demo catalog and customers in memory, books a few appointments,
records payments and prints the resulting report.
"""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.booking import BookingLifecycleManager
from app.application.use_cases.identity import IdentityResolver
from app.application.use_cases.report import ReportAggregator
from app.application.use_cases.transactions import TransactionLedger
from app.infrastructure.catalog.catalog_store import CatalogStore
from app.infrastructure.seed import seed_demo_data
from app.infrastructure.store.memory_store import MemoryBookingStore, MemoryCustomerDirectory, MemoryTransactionStore


def main() -> None:
    today = date.today()
    directory = MemoryCustomerDirectory()
    bookings = MemoryBookingStore()
    transactions = MemoryTransactionStore()
    catalog = CatalogStore()
    seed_demo_data(directory, bookings, today)

    manager = BookingLifecycleManager(bookings, catalog, directory, IdentityResolver(directory))
    ledger = TransactionLedger(transactions, bookings)
    aggregator = ReportAggregator(bookings, transactions, catalog)

    massage = manager.create_guest("Walk In", "walkin@example.com", "0111", 3, 2, today, "11:00")
    manager.set_status(massage.id, "completed")
    ledger.record(massage.price, "card", today, booking_id=massage.id, status="completed")

    wrap = manager.create_guest("Walk In", "walkin@example.com", "0111", 5, 3, today + timedelta(days=1), "3pm")
    manager.cancel(wrap.id)

    report = aggregator.generate(today, today + timedelta(days=7), "Next 7 days")

    print("=" * 60)
    print(f"Report: {report.period}")
    print("=" * 60)
    print(f"Total revenue:      {report.total_revenue:.2f}")
    print(f"Bookings:           {report.total_bookings}")
    print(f"Completed:          {report.completed_bookings}")
    print(f"Cancelled:          {report.cancelled_bookings}")
    print(f"Completion rate:    {report.completion_rate:.2f}%")
    print("\nRevenue by service (list price):")
    for row in report.revenue_by_service:
        print(f"  {row.name}: {row.value:.2f}")
    print("\nBookings by status:")
    for row in report.bookings_by_status:
        print(f"  {row.name}: {int(row.value)}")
    print("\nDaily revenue:")
    for row in report.daily_revenue:
        print(f"  {row.date.isoformat()}: {row.revenue:.2f}")


if __name__ == "__main__":
    main()
