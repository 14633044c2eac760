"""
Tests for report aggregation over bookings and transactions.
"""

from __future__ import annotations

from datetime import date, time

import pytest

from app.application.use_cases.report import ReportAggregator, placeholder_customer_retention
from app.domain.entities.booking import Booking, BookingStatus
from app.domain.entities.catalog import Service, Specialist
from app.domain.entities.report import NameValue
from app.domain.entities.transaction import Transaction
from app.infrastructure.catalog.catalog_store import CatalogStore
from app.infrastructure.store.memory_store import MemoryBookingStore, MemoryTransactionStore

D1 = date(2024, 3, 1)
D2 = date(2024, 3, 2)


def _booking(service_id: int, status: BookingStatus, day: date = D1) -> Booking:
    return Booking(
        id=None,
        customer_id=1,
        specialist_id=1,
        service_id=service_id,
        booking_date=day,
        booking_time=time(10, 0),
        status=status,
    )


def _transaction(amount: float, day: date = D1, method: str = "card") -> Transaction:
    return Transaction(id=None, amount=amount, payment_method=method, transaction_date=day)


def _build():
    catalog = CatalogStore(
        services={1: Service(id=1, name="A", price=50.0), 2: Service(id=2, name="B", price=80.0)},
        specialists={1: Specialist(id=1, display_name="Anna")},
    )
    bookings = MemoryBookingStore()
    transactions = MemoryTransactionStore()
    return ReportAggregator(bookings=bookings, transactions=transactions, catalog=catalog), bookings, transactions, catalog


def test_report_scenario():
    aggregator, bookings, transactions, _ = _build()
    bookings.create(_booking(1, BookingStatus.COMPLETED))
    bookings.create(_booking(1, BookingStatus.CANCELLED))
    bookings.create(_booking(2, BookingStatus.COMPLETED))
    transactions.create(_transaction(50))
    transactions.create(_transaction(80))

    report = aggregator.generate(D1, D1, "March")

    assert report.period == "March"
    assert report.total_revenue == 130
    assert report.total_bookings == 3
    assert report.completed_bookings == 2
    assert report.cancelled_bookings == 1
    assert report.completion_rate == pytest.approx(66.67, abs=0.01)
    assert {(r.name, r.value) for r in report.revenue_by_service} == {("A", 100), ("B", 80)}
    assert {(r.name, r.value) for r in report.bookings_by_status} == {("COMPLETED", 2), ("CANCELLED", 1)}
    assert [(r.date, r.revenue) for r in report.daily_revenue] == [(D1, 130)]


def test_report_over_empty_range():
    aggregator, _, _, _ = _build()

    report = aggregator.generate("2024-01-01", "2024-01-31", "January")

    assert report.total_bookings == 0
    assert report.completion_rate == 0
    assert report.total_revenue == 0
    assert report.revenue_by_service == []
    assert report.daily_revenue == []


def test_report_with_inverted_range_is_empty():
    aggregator, bookings, transactions, _ = _build()
    bookings.create(_booking(1, BookingStatus.COMPLETED))
    transactions.create(_transaction(50))

    report = aggregator.generate(D2, D1, "inverted")

    assert report.total_bookings == 0
    assert report.total_revenue == 0


def test_daily_revenue_sorted_and_range_inclusive():
    aggregator, bookings, transactions, _ = _build()
    transactions.create(_transaction(20, D2))
    transactions.create(_transaction(10, D1))
    transactions.create(_transaction(5, D2))
    transactions.create(_transaction(999, date(2024, 3, 3)))
    bookings.create(_booking(1, BookingStatus.PENDING, D2))
    bookings.create(_booking(1, BookingStatus.PENDING, date(2024, 2, 29)))

    report = aggregator.generate(D1, D2, "two days")

    assert [(r.date, r.revenue) for r in report.daily_revenue] == [(D1, 10), (D2, 25)]
    assert report.total_revenue == 35
    assert report.total_bookings == 1


def test_service_revenue_uses_list_price_and_skips_missing_services():
    aggregator, bookings, transactions, catalog = _build()
    bookings.create(_booking(1, BookingStatus.PENDING))
    bookings.create(_booking(2, BookingStatus.CANCELLED))
    catalog.remove_service(2)

    report = aggregator.generate(D1, D1, "day")

    assert report.revenue_by_service == [NameValue(name="A", value=50.0)]
    assert report.total_revenue == 0
    assert report.total_bookings == 2


def test_retention_is_fixed_placeholder():
    aggregator, _, _, _ = _build()

    report = aggregator.generate(D1, D1, "day")

    assert report.customer_retention_rate == placeholder_customer_retention()
    assert [(r.name, r.value) for r in report.customer_retention_rate] == [("Returning", 65), ("New", 35)]


def test_revenue_and_bookings_summaries():
    aggregator, bookings, transactions, _ = _build()
    transactions.create(_transaction(50, method="card"))
    transactions.create(_transaction(30, method="cash"))
    transactions.create(_transaction(20, method="card"))
    bookings.create(_booking(1, BookingStatus.PENDING))
    bookings.create(_booking(2, BookingStatus.PENDING))
    bookings.create(_booking(2, BookingStatus.CONFIRMED))

    revenue = aggregator.revenue_summary(D1, D1)
    summary = aggregator.bookings_summary(D1, D1)

    assert revenue.total_revenue == 100
    assert {(r.name, r.value) for r in revenue.by_payment_method} == {("card", 70), ("cash", 30)}
    assert summary.total_bookings == 3
    assert {(r.name, r.value) for r in summary.by_status} == {("PENDING", 2), ("CONFIRMED", 1)}
