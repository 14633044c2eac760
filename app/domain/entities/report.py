from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class NameValue:
    name: str
    value: float


@dataclass(frozen=True)
class DailyRevenue:
    date: date
    revenue: float


@dataclass(frozen=True)
class Report:
    period: str
    total_revenue: float = 0.0
    total_bookings: int = 0
    completed_bookings: int = 0
    cancelled_bookings: int = 0
    completion_rate: float = 0.0
    revenue_by_service: list[NameValue] = field(default_factory=list)
    bookings_by_status: list[NameValue] = field(default_factory=list)
    daily_revenue: list[DailyRevenue] = field(default_factory=list)
    customer_retention_rate: list[NameValue] = field(default_factory=list)


@dataclass(frozen=True)
class RevenueSummary:
    total_revenue: float
    by_payment_method: list[NameValue]


@dataclass(frozen=True)
class BookingsSummary:
    total_bookings: int
    by_status: list[NameValue]
