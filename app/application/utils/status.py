from __future__ import annotations

from app.application.exceptions import InvalidArgumentError
from app.domain.entities.booking import BookingStatus
from app.domain.entities.transaction import TransactionStatus


def parse_booking_status(token: BookingStatus | str | None) -> BookingStatus:
    """Case-insensitive match against the booking status tokens."""
    if isinstance(token, BookingStatus):
        return token
    normalized = (token or "").strip().upper()
    try:
        return BookingStatus(normalized)
    except ValueError:
        raise InvalidArgumentError("status", token, f"Invalid status: {token}") from None


def parse_transaction_status(token: TransactionStatus | str | None) -> TransactionStatus:
    if isinstance(token, TransactionStatus):
        return token
    normalized = (token or "").strip().upper()
    try:
        return TransactionStatus(normalized)
    except ValueError:
        raise InvalidArgumentError("status", token, f"Invalid status: {token}") from None
