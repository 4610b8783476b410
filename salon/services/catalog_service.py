"""Catalog service - Business logic for the salon's service catalog."""

import logging

from salon.exceptions import ConflictError, NotFoundError, ValidationError
from salon.models.service import Service
from salon.repositories.service_repository import ServiceRepository
from salon.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    {"name": "Corte de Cabelo", "price": 50.0, "duration_minutes": 30},
    {"name": "Escova", "price": 40.0, "duration_minutes": 45},
    {"name": "Coloração", "price": 100.0, "duration_minutes": 120},
    {"name": "Hidratação", "price": 60.0, "duration_minutes": 60},
    {"name": "Manicure", "price": 30.0, "duration_minutes": 30},
    {"name": "Pedicure", "price": 35.0, "duration_minutes": 40},
]


def validate_service(data: ServiceCreate | ServiceUpdate) -> None:
    if not data.name.strip():
        raise ValidationError("service name is required")
    if data.price < 0:
        raise ValidationError("service price cannot be negative")
    if data.duration_minutes <= 0:
        raise ValidationError("service duration must be greater than 0")


class CatalogService:
    """Service class for catalog operations."""

    def __init__(self, repo: ServiceRepository):
        self.repo = repo

    async def create_service(self, data: ServiceCreate) -> Service:
        validate_service(data)
        return await self.repo.create(Service(**data.model_dump()))

    async def get_service(self, service_id: int) -> Service:
        return await self.repo.find_by_id(service_id)

    async def list_services(self) -> list[Service]:
        return await self.repo.find_all()

    async def update_service(self, service_id: int, data: ServiceUpdate) -> Service:
        validate_service(data)
        service = await self.repo.find_by_id(service_id)
        for field, value in data.model_dump().items():
            setattr(service, field, value)
        await self.repo.update(service)
        return await self.repo.find_by_id(service_id)

    async def delete_service(self, service_id: int) -> None:
        service = await self.repo.find_by_id(service_id)
        if await self.repo.is_booked(service_id):
            raise ConflictError("service is part of existing appointments")
        await self.repo.delete(service)

    async def resolve(self, service_ids: list[int]) -> list[ServiceResponse]:
        """Look up services in the given order; repeated ids are kept."""
        found = await self.repo.find_by_ids(service_ids)
        missing = [service_id for service_id in service_ids if service_id not in found]
        if missing:
            raise NotFoundError("service", missing[0])
        return [ServiceResponse.model_validate(found[service_id]) for service_id in service_ids]

    async def seed_defaults(self) -> int:
        """Insert the default catalog when it is empty; returns the number inserted."""
        if await self.repo.count() > 0:
            return 0
        for item in DEFAULT_SERVICES:
            await self.repo.create(Service(**item))
        logger.info("Default services seeded successfully")
        return len(DEFAULT_SERVICES)
