from __future__ import annotations

import json
import threading
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

from app.application.exceptions import DuplicateEmailError, InternalError, NotFoundError
from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.customer_directory import CustomerDirectoryPort
from app.application.ports.transaction_repository import TransactionRepositoryPort
from app.domain.entities.booking import Booking, BookingStatus
from app.domain.entities.customer import CustomerIdentity, CustomerRole, NewCustomer
from app.domain.entities.transaction import Transaction, TransactionStatus


class JsonCollection:
    """One JSON file holding a collection of records keyed by integer id."""

    def __init__(self, data_dir: str | Path, name: str) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / f"{name}.json"
        self.lock = threading.RLock()

    def load(self) -> dict[str, Any]:
        """Load collection data from disk, return an empty collection if missing."""
        if not self._file_path.exists():
            return {"next_id": 1, "items": {}, "version": 1}
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise InternalError("Storage read failed", {"error": str(e)}) from e
        data.setdefault("next_id", 1)
        data.setdefault("items", {})
        data.setdefault("version", 1)
        return data

    def save(self, data: dict[str, Any]) -> None:
        """Save collection data atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise InternalError("Storage write failed", {"error": str(e)}) from e

    def records(self) -> list[dict[str, Any]]:
        with self.lock:
            return list(self.load()["items"].values())

    def record(self, record_id: int) -> dict[str, Any] | None:
        with self.lock:
            return self.load()["items"].get(str(record_id))


class JsonBookingStore(BookingRepositoryPort):
    def __init__(self, data_dir: str = "./data/store") -> None:
        self._collection = JsonCollection(data_dir, "bookings")

    def create(self, booking: Booking) -> Booking:
        now = _utcnow()
        with self._collection.lock:
            data = self._collection.load()
            record = _serialize_booking(booking)
            record.update({"id": data["next_id"], "created_at": now.isoformat(), "updated_at": now.isoformat()})
            data["items"][str(record["id"])] = record
            data["next_id"] += 1
            self._collection.save(data)
        return _deserialize_booking(record)

    def get(self, booking_id: int) -> Booking | None:
        record = self._collection.record(booking_id)
        return _deserialize_booking(record) if record else None

    def update(self, booking: Booking) -> Booking:
        with self._collection.lock:
            data = self._collection.load()
            current = data["items"].get(str(booking.id))
            if current is None:
                raise NotFoundError("Booking", booking.id)
            record = _serialize_booking(booking)
            record["created_at"] = current.get("created_at")
            record["updated_at"] = _utcnow().isoformat()
            data["items"][str(booking.id)] = record
            self._collection.save(data)
        return _deserialize_booking(record)

    def list_all(self) -> list[Booking]:
        return [_deserialize_booking(r) for r in self._collection.records()]

    def list_by_date_range(self, start: date, end: date) -> list[Booking]:
        return [b for b in self.list_all() if start <= b.booking_date <= end]

    def list_by_customer(self, customer_id: int) -> list[Booking]:
        return [b for b in self.list_all() if b.customer_id == customer_id]

    def list_by_status(self, status: BookingStatus) -> list[Booking]:
        return [b for b in self.list_all() if b.status == status]


class JsonTransactionStore(TransactionRepositoryPort):
    def __init__(self, data_dir: str = "./data/store") -> None:
        self._collection = JsonCollection(data_dir, "transactions")

    def create(self, transaction: Transaction) -> Transaction:
        with self._collection.lock:
            data = self._collection.load()
            record = _serialize_transaction(transaction)
            record["id"] = data["next_id"]
            data["items"][str(record["id"])] = record
            data["next_id"] += 1
            self._collection.save(data)
        return _deserialize_transaction(record)

    def get(self, transaction_id: int) -> Transaction | None:
        record = self._collection.record(transaction_id)
        return _deserialize_transaction(record) if record else None

    def update(self, transaction: Transaction) -> Transaction:
        with self._collection.lock:
            data = self._collection.load()
            if str(transaction.id) not in data["items"]:
                raise NotFoundError("Transaction", transaction.id)
            data["items"][str(transaction.id)] = _serialize_transaction(transaction)
            self._collection.save(data)
        return transaction

    def list_all(self) -> list[Transaction]:
        return [_deserialize_transaction(r) for r in self._collection.records()]

    def list_by_date_range(self, start: date, end: date) -> list[Transaction]:
        return [t for t in self.list_all() if start <= t.transaction_date <= end]


class JsonCustomerDirectory(CustomerDirectoryPort):
    def __init__(self, data_dir: str = "./data/store") -> None:
        self._collection = JsonCollection(data_dir, "customers")

    def get_user_by_id(self, customer_id: int) -> CustomerIdentity | None:
        record = self._collection.record(customer_id)
        return _deserialize_customer(record) if record else None

    def get_user_by_email(self, email: str) -> CustomerIdentity | None:
        for record in self._collection.records():
            if record["email"] == email:
                return _deserialize_customer(record)
        return None

    def create_user(self, fields: NewCustomer) -> CustomerIdentity:
        # Check and insert under one lock so the email index stays unique.
        with self._collection.lock:
            data = self._collection.load()
            if any(r["email"] == fields.email for r in data["items"].values()):
                raise DuplicateEmailError(fields.email)
            record = {
                "id": data["next_id"],
                "email": fields.email,
                "full_name": fields.full_name,
                "phone": fields.phone,
                "credential": fields.credential,
                "registered": fields.registered,
                "role": fields.role.value,
                "active": fields.active,
            }
            data["items"][str(record["id"])] = record
            data["next_id"] += 1
            self._collection.save(data)
        return _deserialize_customer(record)


def _serialize_booking(booking: Booking) -> dict[str, Any]:
    return {
        "id": booking.id,
        "customer_id": booking.customer_id,
        "specialist_id": booking.specialist_id,
        "service_id": booking.service_id,
        "booking_date": booking.booking_date.isoformat(),
        "booking_time": booking.booking_time.strftime("%H:%M:%S"),
        "status": booking.status.value,
        "note": booking.note,
        "created_at": booking.created_at.isoformat() if booking.created_at else None,
        "updated_at": booking.updated_at.isoformat() if booking.updated_at else None,
    }


def _deserialize_booking(data: dict[str, Any]) -> Booking:
    return Booking(
        id=data["id"],
        customer_id=data["customer_id"],
        specialist_id=data["specialist_id"],
        service_id=data["service_id"],
        booking_date=date.fromisoformat(data["booking_date"]),
        booking_time=time.fromisoformat(data["booking_time"]),
        status=BookingStatus(data["status"]),
        note=data.get("note"),
        created_at=_parse_datetime(data.get("created_at")),
        updated_at=_parse_datetime(data.get("updated_at")),
    )


def _serialize_transaction(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "booking_id": transaction.booking_id,
        "amount": transaction.amount,
        "payment_method": transaction.payment_method,
        "status": transaction.status.value,
        "transaction_date": transaction.transaction_date.isoformat(),
        "reference_number": transaction.reference_number,
        "note": transaction.note,
    }


def _deserialize_transaction(data: dict[str, Any]) -> Transaction:
    return Transaction(
        id=data["id"],
        amount=data["amount"],
        payment_method=data["payment_method"],
        transaction_date=date.fromisoformat(data["transaction_date"]),
        booking_id=data.get("booking_id"),
        status=TransactionStatus(data.get("status", TransactionStatus.PENDING.value)),
        reference_number=data.get("reference_number"),
        note=data.get("note"),
    )


def _deserialize_customer(data: dict[str, Any]) -> CustomerIdentity:
    return CustomerIdentity(
        id=data["id"],
        email=data["email"],
        full_name=data.get("full_name") or "",
        phone=data.get("phone"),
        registered=data.get("registered", True),
        role=CustomerRole(data.get("role", CustomerRole.CUSTOMER.value)),
        active=data.get("active", True),
    )


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
