from __future__ import annotations

from typing import Any


class BookingEngineError(RuntimeError):
    """Base class for errors raised by the booking engine."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)


class NotFoundError(BookingEngineError):
    """Raised when a referenced booking, customer, service or specialist does not exist."""

    def __init__(self, entity: str, identifier: Any) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(
            f"{entity} not found with id: {identifier}",
            {"entity": entity, "id": identifier},
        )


class InvalidArgumentError(BookingEngineError):
    """Raised for unrecognized status tokens and malformed dates or times."""

    def __init__(self, field: str, value: Any, reason: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(
            reason or f"Invalid {field}: {value}",
            {"field": field, "value": value},
        )


class ConflictError(BookingEngineError):
    """Raised when a request conflicts with current state (transitions, overlapping slots)."""
    pass


class DuplicateEmailError(ConflictError):
    """Raised by customer stores when the unique email constraint rejects an insert."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Customer already exists with email: {email}", {"field": "email"})


class InternalError(BookingEngineError):
    """Raised when the storage layer fails."""
    pass
