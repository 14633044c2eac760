from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CustomerRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    STAFF = "STAFF"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class CustomerIdentity:
    id: int
    email: str
    full_name: str
    phone: str | None = None
    registered: bool = True  # False for identities provisioned from a guest booking
    role: CustomerRole = CustomerRole.CUSTOMER
    active: bool = True


@dataclass(frozen=True)
class NewCustomer:
    email: str
    full_name: str
    phone: str | None
    credential: str
    role: CustomerRole = CustomerRole.CUSTOMER
    registered: bool = True
    active: bool = True
