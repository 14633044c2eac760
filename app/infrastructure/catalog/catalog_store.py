from __future__ import annotations

from app.application.exceptions import NotFoundError
from app.application.ports.catalog import CatalogPort
from app.domain.entities.catalog import Service, Specialist
from app.infrastructure.catalog.catalog_data import SERVICES, SPECIALISTS


class CatalogStore(CatalogPort):
    def __init__(
        self,
        services: dict[int, Service] | None = None,
        specialists: dict[int, Specialist] | None = None,
    ) -> None:
        self._services = dict(SERVICES if services is None else services)
        self._specialists = dict(SPECIALISTS if specialists is None else specialists)

    def get_service_by_id(self, service_id: int) -> Service:
        service = self._services.get(service_id)
        if service is None:
            raise NotFoundError("Service", service_id)
        return service

    def get_specialist_by_id(self, specialist_id: int) -> Specialist:
        specialist = self._specialists.get(specialist_id)
        if specialist is None:
            raise NotFoundError("Specialist", specialist_id)
        return specialist

    def remove_service(self, service_id: int) -> None:
        self._services.pop(service_id, None)

    def remove_specialist(self, specialist_id: int) -> None:
        self._specialists.pop(specialist_id, None)
