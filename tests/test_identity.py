"""
Tests for customer identity resolution and guest provisioning.
"""

from __future__ import annotations

import pytest

from app.application.exceptions import InvalidArgumentError, NotFoundError
from app.application.use_cases.identity import IdentityResolver
from app.domain.entities.customer import CustomerRole, NewCustomer
from app.infrastructure.store.memory_store import MemoryCustomerDirectory


def test_resolve_existing_customer():
    directory = MemoryCustomerDirectory()
    created = directory.create_user(
        NewCustomer(email="jane@example.com", full_name="Jane Doe", phone="555", credential="x")
    )
    resolver = IdentityResolver(directory)

    assert resolver.resolve(created.id) == created


def test_resolve_missing_customer_raises_not_found():
    resolver = IdentityResolver(MemoryCustomerDirectory())

    with pytest.raises(NotFoundError) as exc_info:
        resolver.resolve(42)
    assert exc_info.value.details["id"] == 42


def test_provision_creates_guest_identity():
    resolver = IdentityResolver(MemoryCustomerDirectory())

    guest = resolver.resolve_or_provision("Guest One", "guest@example.com", "0100")

    assert guest.email == "guest@example.com"
    assert guest.full_name == "Guest One"
    assert guest.registered is False
    assert guest.role == CustomerRole.CUSTOMER
    assert guest.active is True


def test_provision_is_idempotent_and_keeps_original_name():
    """Second guest booking with the same email reuses the identity without renaming it."""
    directory = MemoryCustomerDirectory()
    resolver = IdentityResolver(directory)

    first = resolver.resolve_or_provision("First Name", "repeat@example.com", "111")
    second = resolver.resolve_or_provision("Other Name", "repeat@example.com", "222")

    assert first == second
    assert second.full_name == "First Name"
    assert second.phone == "111"


def test_provision_returns_registered_account_unchanged():
    directory = MemoryCustomerDirectory()
    account = directory.create_user(
        NewCustomer(email="member@example.com", full_name="Member", phone=None, credential="hash")
    )
    resolver = IdentityResolver(directory)

    resolved = resolver.resolve_or_provision("Someone Else", "member@example.com", "999")

    assert resolved == account
    assert resolved.registered is True


def test_email_lookup_is_case_sensitive():
    resolver = IdentityResolver(MemoryCustomerDirectory())

    lower = resolver.resolve_or_provision("A", "case@example.com", None)
    upper = resolver.resolve_or_provision("B", "Case@example.com", None)

    assert lower.id != upper.id


def test_provision_requires_email():
    resolver = IdentityResolver(MemoryCustomerDirectory())

    with pytest.raises(InvalidArgumentError):
        resolver.resolve_or_provision("No Email", "  ", None)


class RacingDirectory(MemoryCustomerDirectory):
    """Simulates another request inserting the same email between lookup and insert."""

    def __init__(self) -> None:
        super().__init__()
        self.lookups = 0

    def get_user_by_email(self, email):
        self.lookups += 1
        if self.lookups == 1:
            return None
        return super().get_user_by_email(email)

    def create_user(self, fields):
        if super().get_user_by_email(fields.email) is None:
            super().create_user(
                NewCustomer(email=fields.email, full_name="Winner", phone=None, credential="x", registered=False)
            )
        return super().create_user(fields)


def test_provision_recovers_from_unique_email_race():
    directory = RacingDirectory()
    resolver = IdentityResolver(directory)

    customer = resolver.resolve_or_provision("Loser", "race@example.com", None)

    assert customer.full_name == "Winner"
    assert directory.lookups == 2
