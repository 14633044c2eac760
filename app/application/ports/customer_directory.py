from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.customer import CustomerIdentity, NewCustomer


class CustomerDirectoryPort(ABC):
    @abstractmethod
    def get_user_by_id(self, customer_id: int) -> CustomerIdentity | None:
        raise NotImplementedError

    @abstractmethod
    def get_user_by_email(self, email: str) -> CustomerIdentity | None:
        """Exact, case-sensitive lookup by email as persisted."""
        raise NotImplementedError

    @abstractmethod
    def create_user(self, fields: NewCustomer) -> CustomerIdentity:
        """
        Insert a new customer record.

        Implementations must enforce email uniqueness at insert time and raise
        DuplicateEmailError when another record already holds the email.
        """
        raise NotImplementedError
