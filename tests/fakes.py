"""In-memory stand-ins for the persistence layer and the clock."""

from datetime import datetime, timedelta

from salon.exceptions import NotFoundError, PersistenceError
from salon.schemas.appointment import AppointmentResponse


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class InMemoryAppointmentRepository:
    """AppointmentRepository keeping deep copies in a dict."""

    def __init__(self, next_id: int = 1):
        self.rows: dict[int, AppointmentResponse] = {}
        self.next_id = next_id
        self.create_calls = 0
        self.update_calls = 0
        self.week_lookups = 0
        self.fail_week_lookup = False
        self.fail_update = False

    def add(self, appointment: AppointmentResponse) -> AppointmentResponse:
        if appointment.id is None:
            appointment = appointment.model_copy(update={"id": self.next_id})
        self.next_id = max(self.next_id, appointment.id + 1)
        self.rows[appointment.id] = appointment.model_copy(deep=True)
        return appointment

    async def create(self, appointment: AppointmentResponse) -> AppointmentResponse:
        self.create_calls += 1
        return self.add(appointment.model_copy(update={"id": None}))

    async def update(self, appointment: AppointmentResponse) -> None:
        self.update_calls += 1
        if self.fail_update:
            raise PersistenceError("database is locked")
        if appointment.id not in self.rows:
            raise NotFoundError("appointment", appointment.id)
        self.rows[appointment.id] = appointment.model_copy(deep=True)

    async def find_by_id(self, appointment_id: int) -> AppointmentResponse:
        if appointment_id not in self.rows:
            raise NotFoundError("appointment", appointment_id)
        return self.rows[appointment_id].model_copy(deep=True)

    async def find_user_appointments_in_week(
        self, user_id: int, week_start: datetime, week_end: datetime
    ) -> list[AppointmentResponse]:
        self.week_lookups += 1
        if self.fail_week_lookup:
            raise PersistenceError("connection refused")
        return [
            ap for ap in await self.list_by_period(week_start, week_end)
            if ap.user_id == user_id
        ]

    async def list_by_period(self, start: datetime, end: datetime) -> list[AppointmentResponse]:
        return [
            ap.model_copy(deep=True)
            for ap in sorted(self.rows.values(), key=lambda ap: (ap.date, ap.id))
            if start <= ap.date <= end
        ]

    async def list_all(self) -> list[AppointmentResponse]:
        return [ap.model_copy(deep=True) for ap in self.rows.values()]
