from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from app.application.exceptions import InvalidArgumentError, NotFoundError
from app.application.ports.booking_repository import BookingRepositoryPort
from app.application.ports.transaction_repository import TransactionRepositoryPort
from app.application.utils.date_parser import parse_booking_date
from app.application.utils.status import parse_transaction_status
from app.domain.entities.transaction import Transaction, TransactionStatus


class TransactionLedger:
    def __init__(self, transactions: TransactionRepositoryPort, bookings: BookingRepositoryPort) -> None:
        self._transactions = transactions
        self._bookings = bookings
        self._logger = logging.getLogger(__name__)

    def record(
        self,
        amount: float,
        payment_method: str,
        transaction_date: date | str,
        booking_id: int | None = None,
        reference_number: str | None = None,
        note: str | None = None,
        status: TransactionStatus | str = TransactionStatus.PENDING,
    ) -> Transaction:
        if amount < 0:
            raise InvalidArgumentError("amount", amount, "Amount must not be negative")
        if booking_id is not None and self._bookings.get(booking_id) is None:
            raise NotFoundError("Booking", booking_id)

        transaction = self._transactions.create(
            Transaction(
                id=None,
                amount=amount,
                payment_method=payment_method,
                transaction_date=parse_booking_date(transaction_date, "transaction_date"),
                booking_id=booking_id,
                status=parse_transaction_status(status),
                reference_number=reference_number,
                note=note,
            )
        )
        self._logger.info("Transaction recorded", extra={"booking_id": booking_id, "status": transaction.status.value})
        return transaction

    def get(self, transaction_id: int) -> Transaction:
        transaction = self._transactions.get(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def list_transactions(
        self,
        status: TransactionStatus | str | None = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> list[Transaction]:
        """Filter by status and/or an inclusive date range. A range needs both ends."""
        if (start_date is None) != (end_date is None):
            field = "end_date" if end_date is None else "start_date"
            raise InvalidArgumentError(field, None, "start_date and end_date must be given together")
        if start_date is not None and end_date is not None:
            items = self._transactions.list_by_date_range(
                parse_booking_date(start_date, "start_date"),
                parse_booking_date(end_date, "end_date"),
            )
        else:
            items = self._transactions.list_all()
        if status:
            wanted = parse_transaction_status(status)
            items = [t for t in items if t.status == wanted]
        return items

    def set_status(self, transaction_id: int, status: TransactionStatus | str) -> Transaction:
        transaction = self.get(transaction_id)
        updated = self._transactions.update(replace(transaction, status=parse_transaction_status(status)))
        self._logger.info("Transaction status updated", extra={"status": updated.status.value})
        return updated
