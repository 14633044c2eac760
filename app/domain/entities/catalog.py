from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: int
    name: str
    price: float
    duration_minutes: int = 60
    active: bool = True


@dataclass(frozen=True)
class Specialist:
    id: int
    display_name: str
    role: str = "Therapist"
