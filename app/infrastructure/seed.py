from __future__ import annotations

import logging
import secrets
from datetime import date, time, timedelta

from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.customer_directory import CustomerDirectoryPort
from app.domain.entities.booking import Booking, BookingStatus
from app.domain.entities.customer import CustomerRole, NewCustomer

DEMO_CUSTOMERS = (
    ("admin@example.com", "Admin User", "0123456789", CustomerRole.ADMIN),
    ("user@example.com", "Regular User", "0987654321", CustomerRole.CUSTOMER),
    ("staff@example.com", "Staff Member", "0123456780", CustomerRole.STAFF),
)

logger = logging.getLogger(__name__)


def seed_demo_data(
    customers: CustomerDirectoryPort,
    bookings: BookingRepositoryPort,
    today: date | None = None,
) -> bool:
    """Insert demo accounts and two sample bookings. Returns False if already seeded."""
    if customers.get_user_by_email("user@example.com") is not None:
        return False

    today = today or date.today()
    for email, name, phone, role in DEMO_CUSTOMERS:
        customers.create_user(
            NewCustomer(
                email=email,
                full_name=name,
                phone=phone,
                credential=secrets.token_urlsafe(16),
                role=role,
            )
        )

    customer = customers.get_user_by_email("user@example.com")
    bookings.create(
        Booking(
            id=None,
            customer_id=customer.id,
            specialist_id=1,
            service_id=1,
            booking_date=today + timedelta(days=1),
            booking_time=time(10, 0),
            status=BookingStatus.CONFIRMED,
            note="First time trying this service",
        )
    )
    bookings.create(
        Booking(
            id=None,
            customer_id=customer.id,
            specialist_id=1,
            service_id=2,
            booking_date=today + timedelta(days=7),
            booking_time=time(14, 0),
            status=BookingStatus.PENDING,
            note="",
        )
    )
    logger.info("Demo data seeded", extra={"customer_id": customer.id})
    return True
