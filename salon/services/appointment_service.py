"""Appointment service - Business rules for the appointment lifecycle."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Literal, NamedTuple

import logfire

from salon.exceptions import NoServicesError, PersistenceError, TooLateToModifyError
from salon.models.appointment import AppointmentStatus
from salon.repositories.appointment_repository import AppointmentRepository
from salon.schemas.appointment import AppointmentResponse
from salon.schemas.service import ServiceResponse
from salon.services.scheduling import week_range
from salon.utils import utcnow

logger = logging.getLogger(__name__)

SuggestionMode = Literal["block", "advisory"]
LookupFailurePolicy = Literal["fail", "ignore"]


class BookingResult(NamedTuple):
    created: AppointmentResponse | None
    suggestion: AppointmentResponse | None


class WeeklyPerformance(NamedTuple):
    week_start: datetime
    week_end: datetime
    total: int
    completed: int


class AppointmentService:
    """Service class for appointment operations.

    Args:
        repo: Appointment storage.
        clock: Returns the current naive UTC time.
        modification_cutoff: Minimum lead time for ``update_appointment``.
        suggestion_mode: ``block`` returns a pending same-week appointment
            instead of booking; ``advisory`` books anyway and still suggests it.
        week_lookup_failure: ``fail`` propagates a failed same-week lookup,
            ``ignore`` books as if the week were empty.
    """

    def __init__(
        self,
        repo: AppointmentRepository,
        clock: Callable[[], datetime] = utcnow,
        modification_cutoff: timedelta = timedelta(hours=48),
        suggestion_mode: SuggestionMode = "block",
        week_lookup_failure: LookupFailurePolicy = "fail",
    ):
        self.repo = repo
        self.clock = clock
        self.modification_cutoff = modification_cutoff
        self.suggestion_mode = suggestion_mode
        self.week_lookup_failure = week_lookup_failure

    async def create_appointment(
        self, user_id: int, services: list[ServiceResponse], date: datetime
    ) -> BookingResult:
        """Book services for a user, or point them at a pending booking in the same week."""
        if not services:
            raise NoServicesError()

        week_start, week_end = week_range(date)
        existing = await self._find_week(user_id, week_start, week_end)
        suggestion = next(
            (ap for ap in existing if ap.status == AppointmentStatus.PENDING), None
        )

        if suggestion is not None and self.suggestion_mode == "block":
            logfire.info(
                "appointment_suggested",
                user_id=user_id,
                suggestion_id=suggestion.id,
                date=date.isoformat(),
            )
            return BookingResult(created=None, suggestion=suggestion)

        now = self.clock()
        created = await self.repo.create(
            AppointmentResponse(
                user_id=user_id,
                services=list(services),
                date=date,
                status=AppointmentStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
        )
        logfire.info(
            "appointment_created",
            appointment_id=created.id,
            user_id=user_id,
            services=len(services),
        )
        return BookingResult(created=created, suggestion=suggestion)

    async def update_appointment(
        self, appointment_id: int, data: AppointmentResponse
    ) -> AppointmentResponse:
        """Replace an appointment's data; returns the record as it was before the update."""
        existing = await self.repo.find_by_id(appointment_id)

        now = self.clock()
        if existing.date - now < self.modification_cutoff:
            logger.info(f"Rejected late change to appointment {appointment_id}")
            raise TooLateToModifyError()

        if not data.services:
            raise NoServicesError()

        await self.repo.update(
            data.model_copy(
                update={
                    "id": appointment_id,
                    "created_at": existing.created_at,
                    "updated_at": now,
                }
            )
        )
        logfire.info("appointment_updated", appointment_id=appointment_id)
        return existing

    async def get_appointment(self, appointment_id: int) -> AppointmentResponse:
        return await self.repo.find_by_id(appointment_id)

    async def change_status(
        self, appointment_id: int, status: AppointmentStatus
    ) -> AppointmentResponse:
        """Set any status; no transition rules are enforced."""
        appointment = await self.repo.find_by_id(appointment_id)
        appointment.status = status
        appointment.updated_at = self.clock()
        await self.repo.update(appointment)
        logfire.info(
            "appointment_status_changed",
            appointment_id=appointment_id,
            status=status.value,
        )
        return appointment

    async def confirm_appointment(self, appointment_id: int) -> AppointmentResponse:
        return await self.change_status(appointment_id, AppointmentStatus.CONFIRMED)

    async def cancel_appointment(self, appointment_id: int) -> AppointmentResponse:
        return await self.change_status(appointment_id, AppointmentStatus.CANCELED)

    async def merge_appointments(
        self, appointment_id: int, new_services: list[ServiceResponse]
    ) -> AppointmentResponse:
        """Append services to an existing appointment and return the stored result."""
        appointment = await self.repo.find_by_id(appointment_id)
        appointment.services = appointment.services + list(new_services)
        appointment.updated_at = self.clock()

        await self.repo.update(appointment)
        logfire.info(
            "appointment_merged",
            appointment_id=appointment_id,
            added=len(new_services),
        )
        return await self.repo.find_by_id(appointment_id)

    async def list_history(self, start: datetime, end: datetime) -> list[AppointmentResponse]:
        return await self.repo.list_by_period(start, end)

    async def list_all(self) -> list[AppointmentResponse]:
        return await self.repo.list_all()

    async def list_incoming(self, days_ahead: int = 7) -> list[AppointmentResponse]:
        """Appointments scheduled from now over the next ``days_ahead`` days."""
        now = self.clock()
        return await self.repo.list_by_period(now, now + timedelta(days=days_ahead))

    async def weekly_performance(self) -> WeeklyPerformance:
        """Count this week's appointments and how many are done."""
        week_start, week_end = week_range(self.clock())
        appointments = await self.repo.list_by_period(week_start, week_end)
        completed = sum(1 for ap in appointments if ap.status == AppointmentStatus.DONE)
        return WeeklyPerformance(
            week_start=week_start,
            week_end=week_end,
            total=len(appointments),
            completed=completed,
        )

    async def _find_week(
        self, user_id: int, week_start: datetime, week_end: datetime
    ) -> list[AppointmentResponse]:
        try:
            return await self.repo.find_user_appointments_in_week(user_id, week_start, week_end)
        except PersistenceError as e:
            if self.week_lookup_failure == "fail":
                raise
            logger.warning(f"Same-week lookup failed for user {user_id}, booking anyway: {e}")
            return []
