"""Service repository - persistence for the service catalog."""

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salon.models.appointment import AppointmentServiceLink
from salon.models.service import Service
from salon.exceptions import NotFoundError, PersistenceError


class ServiceRepository:
    """Catalog storage backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, service: Service) -> Service:
        try:
            self.db.add(service)
            await self.db.flush()
            await self.db.refresh(service)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to create service: {e}") from e
        return service

    async def find_by_id(self, service_id: int) -> Service:
        try:
            service = await self.db.get(Service, service_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to load service {service_id}: {e}") from e
        if service is None:
            raise NotFoundError("service", service_id)
        return service

    async def find_by_ids(self, service_ids: list[int]) -> dict[int, Service]:
        if not service_ids:
            return {}
        query = select(Service).where(Service.id.in_(set(service_ids)))
        result = await self._execute(query, "failed to load services")
        return {service.id: service for service in result.scalars().all()}

    async def find_all(self) -> list[Service]:
        result = await self._execute(select(Service).order_by(Service.id), "failed to list services")
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self._execute(select(func.count(Service.id)), "failed to count services")
        return result.scalar_one()

    async def is_booked(self, service_id: int) -> bool:
        query = select(func.count(AppointmentServiceLink.id)).where(
            AppointmentServiceLink.service_id == service_id
        )
        result = await self._execute(query, f"failed to check bookings of service {service_id}")
        return result.scalar_one() > 0

    async def update(self, service: Service) -> None:
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to update service {service.id}: {e}") from e

    async def delete(self, service: Service) -> None:
        try:
            await self.db.delete(service)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to delete service {service.id}: {e}") from e

    async def _execute(self, query, failure: str):
        try:
            return await self.db.execute(query)
        except SQLAlchemyError as e:
            raise PersistenceError(f"{failure}: {e}") from e
