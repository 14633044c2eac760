from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from app.domain.entities.transaction import Transaction


class TransactionRepositoryPort(ABC):
    @abstractmethod
    def create(self, transaction: Transaction) -> Transaction:
        raise NotImplementedError

    @abstractmethod
    def get(self, transaction_id: int) -> Transaction | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, transaction: Transaction) -> Transaction:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Transaction]:
        raise NotImplementedError

    @abstractmethod
    def list_by_date_range(self, start: date, end: date) -> list[Transaction]:
        """Transactions with transaction_date in [start, end]."""
        raise NotImplementedError
