from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime, timezone

from app.application.exceptions import DuplicateEmailError, NotFoundError
from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.customer_directory import CustomerDirectoryPort
from app.application.ports.transaction_repository import TransactionRepositoryPort
from app.domain.entities.booking import Booking, BookingStatus
from app.domain.entities.customer import CustomerIdentity, NewCustomer
from app.domain.entities.transaction import Transaction


class MemoryBookingStore(BookingRepositoryPort):
    def __init__(self) -> None:
        self._items: dict[int, Booking] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, booking: Booking) -> Booking:
        now = _utcnow()
        with self._lock:
            stored = replace(booking, id=self._next_id, created_at=now, updated_at=now)
            self._items[stored.id] = stored
            self._next_id += 1
        return stored

    def get(self, booking_id: int) -> Booking | None:
        with self._lock:
            return self._items.get(booking_id)

    def update(self, booking: Booking) -> Booking:
        with self._lock:
            current = self._items.get(booking.id)
            if current is None:
                raise NotFoundError("Booking", booking.id)
            stored = replace(booking, created_at=current.created_at, updated_at=_utcnow())
            self._items[stored.id] = stored
        return stored

    def list_all(self) -> list[Booking]:
        # Snapshot under the lock; writers may resize the dict mid-iteration.
        with self._lock:
            return list(self._items.values())

    def list_by_date_range(self, start: date, end: date) -> list[Booking]:
        return [b for b in self.list_all() if start <= b.booking_date <= end]

    def list_by_customer(self, customer_id: int) -> list[Booking]:
        return [b for b in self.list_all() if b.customer_id == customer_id]

    def list_by_status(self, status: BookingStatus) -> list[Booking]:
        return [b for b in self.list_all() if b.status == status]


class MemoryTransactionStore(TransactionRepositoryPort):
    def __init__(self) -> None:
        self._items: dict[int, Transaction] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, transaction: Transaction) -> Transaction:
        with self._lock:
            stored = replace(transaction, id=self._next_id)
            self._items[stored.id] = stored
            self._next_id += 1
        return stored

    def get(self, transaction_id: int) -> Transaction | None:
        with self._lock:
            return self._items.get(transaction_id)

    def update(self, transaction: Transaction) -> Transaction:
        with self._lock:
            if transaction.id not in self._items:
                raise NotFoundError("Transaction", transaction.id)
            self._items[transaction.id] = transaction
        return transaction

    def list_all(self) -> list[Transaction]:
        with self._lock:
            return list(self._items.values())

    def list_by_date_range(self, start: date, end: date) -> list[Transaction]:
        return [t for t in self.list_all() if start <= t.transaction_date <= end]


class MemoryCustomerDirectory(CustomerDirectoryPort):
    def __init__(self) -> None:
        self._items: dict[int, CustomerIdentity] = {}
        self._by_email: dict[str, int] = {}
        self._credentials: dict[int, str] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_user_by_id(self, customer_id: int) -> CustomerIdentity | None:
        with self._lock:
            return self._items.get(customer_id)

    def get_user_by_email(self, email: str) -> CustomerIdentity | None:
        with self._lock:
            customer_id = self._by_email.get(email)
            return self._items.get(customer_id) if customer_id is not None else None

    def create_user(self, fields: NewCustomer) -> CustomerIdentity:
        with self._lock:
            if fields.email in self._by_email:
                raise DuplicateEmailError(fields.email)
            customer = CustomerIdentity(
                id=self._next_id,
                email=fields.email,
                full_name=fields.full_name,
                phone=fields.phone,
                registered=fields.registered,
                role=fields.role,
                active=fields.active,
            )
            self._items[customer.id] = customer
            self._by_email[customer.email] = customer.id
            self._credentials[customer.id] = fields.credential
            self._next_id += 1
        return customer


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
