from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED})

ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class Booking:
    id: int | None
    customer_id: int
    specialist_id: int
    service_id: int
    booking_date: date
    booking_time: time
    status: BookingStatus = BookingStatus.PENDING
    note: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class BookingView:
    """Booking joined with customer, service and specialist details at read time."""

    id: int
    customer_id: int
    specialist_id: int
    service_id: int
    booking_date: date
    booking_time: time
    status: BookingStatus
    note: str | None = None
    customer: str | None = None
    email: str | None = None
    phone: str | None = None
    service: str | None = None
    price: float | None = None
    specialist: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class BookingFilter:
    customer_id: int | None = None
    start_date: date | str | None = None
    end_date: date | str | None = None
    status: str | None = None
