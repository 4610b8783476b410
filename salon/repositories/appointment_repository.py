"""Appointment repository - persistence for appointments.

The scheduling service depends on the ``AppointmentRepository`` protocol;
``SQLAppointmentRepository`` is the SQLAlchemy implementation used by the API.
"""

from datetime import datetime
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from salon.models.appointment import Appointment, AppointmentServiceLink
from salon.schemas.appointment import AppointmentResponse
from salon.exceptions import NotFoundError, PersistenceError
from salon.utils import utcnow


class AppointmentRepository(Protocol):
    async def create(self, appointment: AppointmentResponse) -> AppointmentResponse: ...

    async def update(self, appointment: AppointmentResponse) -> None: ...

    async def find_by_id(self, appointment_id: int) -> AppointmentResponse: ...

    async def find_user_appointments_in_week(
        self, user_id: int, week_start: datetime, week_end: datetime
    ) -> list[AppointmentResponse]: ...

    async def list_by_period(self, start: datetime, end: datetime) -> list[AppointmentResponse]: ...

    async def list_all(self) -> list[AppointmentResponse]: ...


def _with_services():
    return selectinload(Appointment.service_links).selectinload(AppointmentServiceLink.service)


def _links(appointment: AppointmentResponse) -> list[AppointmentServiceLink]:
    return [
        AppointmentServiceLink(service_id=service.id, position=position)
        for position, service in enumerate(appointment.services)
    ]


class SQLAppointmentRepository:
    """AppointmentRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, appointment: AppointmentResponse) -> AppointmentResponse:
        now = utcnow()
        row = Appointment(
            user_id=appointment.user_id,
            date=appointment.date,
            status=appointment.status.value,
            created_at=appointment.created_at or now,
            updated_at=appointment.updated_at or now,
            service_links=_links(appointment),
        )
        try:
            self.db.add(row)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to create appointment: {e}") from e
        return await self.find_by_id(row.id)

    async def update(self, appointment: AppointmentResponse) -> None:
        try:
            row = await self._load(appointment.id)
            if row is None:
                raise NotFoundError("appointment", appointment.id)
            row.user_id = appointment.user_id
            row.date = appointment.date
            row.status = appointment.status.value
            row.updated_at = appointment.updated_at or utcnow()
            row.service_links = _links(appointment)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to update appointment {appointment.id}: {e}") from e

    async def find_by_id(self, appointment_id: int) -> AppointmentResponse:
        try:
            row = await self._load(appointment_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to load appointment {appointment_id}: {e}") from e
        if row is None:
            raise NotFoundError("appointment", appointment_id)
        return AppointmentResponse.model_validate(row)

    async def find_user_appointments_in_week(
        self, user_id: int, week_start: datetime, week_end: datetime
    ) -> list[AppointmentResponse]:
        query = select(Appointment).where(
            Appointment.user_id == user_id,
            Appointment.date.between(week_start, week_end),
        )
        return await self._list(query)

    async def list_by_period(self, start: datetime, end: datetime) -> list[AppointmentResponse]:
        return await self._list(select(Appointment).where(Appointment.date.between(start, end)))

    async def list_all(self) -> list[AppointmentResponse]:
        return await self._list(select(Appointment))

    async def _load(self, appointment_id: int) -> Appointment | None:
        result = await self.db.execute(
            select(Appointment)
            .where(Appointment.id == appointment_id)
            .options(_with_services())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _list(self, query) -> list[AppointmentResponse]:
        query = (
            query.options(_with_services())
            .order_by(Appointment.date, Appointment.id)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to list appointments: {e}") from e
        return [AppointmentResponse.model_validate(row) for row in result.scalars().all()]
