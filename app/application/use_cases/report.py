from __future__ import annotations

import logging
from collections import Counter, defaultdict
from datetime import date

from app.application.exceptions import NotFoundError
from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.catalog import CatalogPort
from app.application.ports.transaction_repository import TransactionRepositoryPort
from app.application.utils.date_parser import parse_booking_date
from app.domain.entities.booking import BookingStatus
from app.domain.entities.report import BookingsSummary, DailyRevenue, NameValue, Report, RevenueSummary


def placeholder_customer_retention() -> list[NameValue]:
    """Fixed returning/new split. Not computed from booking history yet."""
    return [NameValue(name="Returning", value=65), NameValue(name="New", value=35)]


class ReportAggregator:
    def __init__(
        self,
        bookings: BookingRepositoryPort,
        transactions: TransactionRepositoryPort,
        catalog: CatalogPort,
    ) -> None:
        self._bookings = bookings
        self._transactions = transactions
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    def generate(self, start_date: date | str, end_date: date | str, period: str) -> Report:
        start = parse_booking_date(start_date, "start_date")
        end = parse_booking_date(end_date, "end_date")

        bookings = self._bookings.list_by_date_range(start, end)
        transactions = self._transactions.list_by_date_range(start, end)

        total_revenue = sum(t.amount for t in transactions)
        total_bookings = len(bookings)
        completed = sum(1 for b in bookings if b.status == BookingStatus.COMPLETED)
        cancelled = sum(1 for b in bookings if b.status == BookingStatus.CANCELLED)
        completion_rate = completed / total_bookings * 100 if total_bookings > 0 else 0.0

        # List price of every booked service, whatever the booking status.
        service_revenue: dict[str, float] = defaultdict(float)
        for booking in bookings:
            try:
                service = self._catalog.get_service_by_id(booking.service_id)
            except NotFoundError:
                self._logger.warning("Service missing, skipped in revenue", extra={"booking_id": booking.id})
                continue
            service_revenue[service.name] += service.price

        status_counts = Counter(b.status for b in bookings)

        daily: dict[date, float] = defaultdict(float)
        for transaction in transactions:
            daily[transaction.transaction_date] += transaction.amount

        report = Report(
            period=period,
            total_revenue=total_revenue,
            total_bookings=total_bookings,
            completed_bookings=completed,
            cancelled_bookings=cancelled,
            completion_rate=completion_rate,
            revenue_by_service=[NameValue(name=name, value=value) for name, value in service_revenue.items()],
            bookings_by_status=[NameValue(name=status.value, value=count) for status, count in status_counts.items()],
            daily_revenue=[DailyRevenue(date=day, revenue=daily[day]) for day in sorted(daily)],
            customer_retention_rate=placeholder_customer_retention(),
        )
        self._logger.info("Report generated", extra={"period": period})
        return report

    def revenue_summary(self, start_date: date | str, end_date: date | str) -> RevenueSummary:
        start = parse_booking_date(start_date, "start_date")
        end = parse_booking_date(end_date, "end_date")
        transactions = self._transactions.list_by_date_range(start, end)

        by_method: dict[str, float] = defaultdict(float)
        for transaction in transactions:
            by_method[transaction.payment_method] += transaction.amount

        return RevenueSummary(
            total_revenue=sum(t.amount for t in transactions),
            by_payment_method=[NameValue(name=method, value=value) for method, value in by_method.items()],
        )

    def bookings_summary(self, start_date: date | str, end_date: date | str) -> BookingsSummary:
        start = parse_booking_date(start_date, "start_date")
        end = parse_booking_date(end_date, "end_date")
        bookings = self._bookings.list_by_date_range(start, end)
        counts = Counter(b.status for b in bookings)
        return BookingsSummary(
            total_bookings=len(bookings),
            by_status=[NameValue(name=status.value, value=count) for status, count in counts.items()],
        )
