from __future__ import annotations

from app.domain.entities.catalog import Service, Specialist

SERVICES: dict[int, Service] = {
    1: Service(id=1, name="Basic Facial", price=50.0, duration_minutes=30),
    2: Service(id=2, name="Deluxe Facial", price=80.0, duration_minutes=60),
    3: Service(id=3, name="Swedish Massage", price=70.0, duration_minutes=60),
    4: Service(id=4, name="Deep Tissue Massage", price=90.0, duration_minutes=60),
    5: Service(id=5, name="Detox Body Wrap", price=120.0, duration_minutes=90),
}

SPECIALISTS: dict[int, Specialist] = {
    1: Specialist(id=1, display_name="Staff Member", role="Senior Therapist"),
    2: Specialist(id=2, display_name="Specialist 1", role="Therapist"),
    3: Specialist(id=3, display_name="Specialist 2", role="Therapist"),
    4: Specialist(id=4, display_name="Specialist 3", role="Therapist"),
}
