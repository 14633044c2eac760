from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from app.domain.entities.booking import Booking, BookingStatus


class BookingRepositoryPort(ABC):
    @abstractmethod
    def create(self, booking: Booking) -> Booking:
        """Persist a new booking. Assigns id and timestamps."""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> Booking:
        """Replace a stored booking. Refreshes updated_at, keeps created_at."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_by_date_range(self, start: date, end: date) -> list[Booking]:
        """Bookings with booking_date in [start, end]."""
        raise NotImplementedError

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_by_status(self, status: BookingStatus) -> list[Booking]:
        raise NotImplementedError
