from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


@dataclass(frozen=True)
class Transaction:
    id: int | None
    amount: float
    payment_method: str
    transaction_date: date
    booking_id: int | None = None
    status: TransactionStatus = TransactionStatus.PENDING
    reference_number: str | None = None
    note: str | None = None
