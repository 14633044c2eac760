from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, time

from app.application.exceptions import ConflictError, NotFoundError
from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.catalog import CatalogPort
from app.application.ports.customer_directory import CustomerDirectoryPort
from app.application.use_cases.identity import IdentityResolver
from app.application.utils.date_parser import parse_booking_date, parse_booking_time
from app.application.utils.slots import overlaps, slot_bounds
from app.application.utils.status import parse_booking_status
from app.domain.entities.booking import ALLOWED_TRANSITIONS, Booking, BookingFilter, BookingStatus, BookingView
from app.domain.entities.catalog import Service, Specialist
from app.domain.entities.customer import CustomerIdentity


class BookingLifecycleManager:
    def __init__(
        self,
        bookings: BookingRepositoryPort,
        catalog: CatalogPort,
        customers: CustomerDirectoryPort,
        identity: IdentityResolver,
        enforce_transitions: bool = False,
        check_conflicts: bool = False,
    ) -> None:
        self._bookings = bookings
        self._catalog = catalog
        self._customers = customers
        self._identity = identity
        self._enforce_transitions = enforce_transitions
        self._check_conflicts = check_conflicts
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        customer: CustomerIdentity,
        service_id: int,
        specialist_id: int,
        booking_date: date | str,
        booking_time: time | str,
        note: str | None = None,
        status: str | None = None,
    ) -> BookingView:
        """
        Create a booking for an already resolved customer.

        New bookings always start as PENDING; `status` is accepted only so that
        callers can forward request payloads as-is, and is ignored.
        """
        day = parse_booking_date(booking_date)
        start = parse_booking_time(booking_time)
        service = self._catalog.get_service_by_id(service_id)
        specialist = self._catalog.get_specialist_by_id(specialist_id)

        if self._check_conflicts:
            self._ensure_slot_free(service, specialist, day, start)

        booking = self._bookings.create(
            Booking(
                id=None,
                customer_id=customer.id,
                specialist_id=specialist.id,
                service_id=service.id,
                booking_date=day,
                booking_time=start,
                status=BookingStatus.PENDING,
                note=note,
            )
        )
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "customer_id": customer.id, "status": booking.status.value},
        )
        return self._project(booking)

    def create_for_customer(
        self,
        customer_id: int,
        service_id: int,
        specialist_id: int,
        booking_date: date | str,
        booking_time: time | str,
        note: str | None = None,
    ) -> BookingView:
        customer = self._identity.resolve(customer_id)
        return self.create(customer, service_id, specialist_id, booking_date, booking_time, note)

    def create_guest(
        self,
        name: str,
        email: str,
        phone: str | None,
        service_id: int,
        specialist_id: int,
        booking_date: date | str,
        booking_time: time | str,
        note: str | None = None,
    ) -> BookingView:
        # Validate references before provisioning so a bad request leaves no guest record behind.
        self._catalog.get_service_by_id(service_id)
        self._catalog.get_specialist_by_id(specialist_id)
        parse_booking_date(booking_date)
        parse_booking_time(booking_time)

        customer = self._identity.resolve_or_provision(name, email, phone)
        return self.create(customer, service_id, specialist_id, booking_date, booking_time, note)

    def get(self, booking_id: int) -> BookingView:
        return self._project(self._require(booking_id))

    def set_status(self, booking_id: int, target: BookingStatus | str) -> BookingView:
        booking = self._require(booking_id)
        new_status = parse_booking_status(target)

        if self._enforce_transitions and new_status != booking.status:
            if new_status not in ALLOWED_TRANSITIONS[booking.status]:
                raise ConflictError(
                    f"Cannot change booking status from {booking.status.value} to {new_status.value}",
                    {"id": booking_id, "status": booking.status.value, "target": new_status.value},
                )

        updated = self._bookings.update(replace(booking, status=new_status))
        self._logger.info(
            "Booking status updated",
            extra={"booking_id": booking_id, "status": new_status.value},
        )
        return self._project(updated)

    def cancel(self, booking_id: int) -> BookingView:
        """Cancel unconditionally. Cancelling twice is not an error."""
        booking = self._require(booking_id)
        if booking.status == BookingStatus.CANCELLED:
            return self._project(booking)
        if booking.status.is_terminal:
            self._logger.warning(
                "Cancelling booking in terminal status",
                extra={"booking_id": booking_id, "status": booking.status.value},
            )
        updated = self._bookings.update(replace(booking, status=BookingStatus.CANCELLED))
        self._logger.info("Booking cancelled", extra={"booking_id": booking_id, "status": updated.status.value})
        return self._project(updated)

    def list_all(self) -> list[BookingView]:
        return [self._project(b) for b in self._bookings.list_all()]

    def list_by_customer(self, customer_id: int) -> list[BookingView]:
        self._identity.resolve(customer_id)
        return [self._project(b) for b in self._bookings.list_by_customer(customer_id)]

    def list_by_date_range(self, start: date | str, end: date | str) -> list[BookingView]:
        start_day = parse_booking_date(start, "start_date")
        end_day = parse_booking_date(end, "end_date")
        return [self._project(b) for b in self._bookings.list_by_date_range(start_day, end_day)]

    def list_by_status(self, status: BookingStatus | str) -> list[BookingView]:
        parsed = parse_booking_status(status)
        return [self._project(b) for b in self._bookings.list_by_status(parsed)]

    def list_bookings(self, filter: BookingFilter) -> list[BookingView]:
        if filter.start_date is not None and filter.end_date is not None:
            return self.list_by_date_range(filter.start_date, filter.end_date)
        if filter.status:
            return self.list_by_status(filter.status)
        if filter.customer_id is not None:
            return self.list_by_customer(filter.customer_id)
        return self.list_all()

    def _require(self, booking_id: int) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    def _ensure_slot_free(self, service: Service, specialist: Specialist, day: date, start: time) -> None:
        new_start, new_end = slot_bounds(day, start, service.duration_minutes)
        for existing in self._bookings.list_by_date_range(day, day):
            if existing.specialist_id != specialist.id or existing.status == BookingStatus.CANCELLED:
                continue
            duration = self._duration_of(existing.service_id)
            other_start, other_end = slot_bounds(existing.booking_date, existing.booking_time, duration)
            if overlaps(new_start, new_end, other_start, other_end):
                raise ConflictError(
                    f"Specialist {specialist.id} is already booked at {existing.booking_time.isoformat()} on {day.isoformat()}",
                    {"specialist_id": specialist.id, "booking_id": existing.id},
                )

    def _duration_of(self, service_id: int) -> int:
        try:
            return self._catalog.get_service_by_id(service_id).duration_minutes
        except NotFoundError:
            return 60

    def _project(self, booking: Booking) -> BookingView:
        customer = self._customers.get_user_by_id(booking.customer_id)
        service = self._lookup_service(booking)
        specialist = self._lookup_specialist(booking)

        return BookingView(
            id=booking.id,
            customer_id=booking.customer_id,
            specialist_id=booking.specialist_id,
            service_id=booking.service_id,
            booking_date=booking.booking_date,
            booking_time=booking.booking_time,
            status=booking.status,
            note=booking.note,
            customer=customer.full_name if customer else None,
            email=customer.email if customer else None,
            phone=customer.phone if customer else None,
            service=service.name if service else None,
            price=service.price if service else None,
            specialist=specialist.display_name if specialist else None,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )

    def _lookup_service(self, booking: Booking) -> Service | None:
        try:
            return self._catalog.get_service_by_id(booking.service_id)
        except NotFoundError:
            self._logger.warning("Service missing for booking", extra={"booking_id": booking.id})
            return None

    def _lookup_specialist(self, booking: Booking) -> Specialist | None:
        try:
            return self._catalog.get_specialist_by_id(booking.specialist_id)
        except NotFoundError:
            self._logger.warning("Specialist missing for booking", extra={"booking_id": booking.id})
            return None
