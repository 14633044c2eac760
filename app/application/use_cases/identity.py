from __future__ import annotations

import logging
import secrets

from app.application.exceptions import DuplicateEmailError, InvalidArgumentError, NotFoundError
from app.application.ports.customer_directory import CustomerDirectoryPort
from app.domain.entities.customer import CustomerIdentity, CustomerRole, NewCustomer


class IdentityResolver:
    def __init__(self, directory: CustomerDirectoryPort) -> None:
        self._directory = directory
        self._logger = logging.getLogger(__name__)

    def resolve(self, customer_id: int) -> CustomerIdentity:
        customer = self._directory.get_user_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer

    def resolve_or_provision(self, name: str, email: str, phone: str | None) -> CustomerIdentity:
        """
        Return the identity holding `email`, creating a guest identity if none exists.

        An existing record is returned unchanged: name and phone from the request
        never overwrite it. When a concurrent request inserts the same email first,
        the unique constraint rejects our insert and the lookup is retried.
        """
        if not email or not email.strip():
            raise InvalidArgumentError("email", email, "Email is required for guest bookings")

        existing = self._directory.get_user_by_email(email)
        if existing is not None:
            return existing

        try:
            customer = self._directory.create_user(
                NewCustomer(
                    email=email,
                    full_name=name,
                    phone=phone,
                    credential=_placeholder_credential(),
                    role=CustomerRole.CUSTOMER,
                    registered=False,
                    active=True,
                )
            )
        except DuplicateEmailError:
            existing = self._directory.get_user_by_email(email)
            if existing is None:
                raise
            self._logger.info("Guest provisioning raced, reusing identity", extra={"customer_id": existing.id})
            return existing

        self._logger.info("Guest customer provisioned", extra={"customer_id": customer.id})
        return customer


def _placeholder_credential() -> str:
    # Not a usable password; guests need a separate reset flow to log in.
    return f"!guest:{secrets.token_urlsafe(32)}"
