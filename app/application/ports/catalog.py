from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.catalog import Service, Specialist


class CatalogPort(ABC):
    @abstractmethod
    def get_service_by_id(self, service_id: int) -> Service:
        """Get service by id. Raises NotFoundError if absent."""
        raise NotImplementedError

    @abstractmethod
    def get_specialist_by_id(self, specialist_id: int) -> Specialist:
        """Get specialist by id. Raises NotFoundError if absent."""
        raise NotImplementedError
