"""Appointment routes - booking, rescheduling, merging and cancelling."""

from datetime import datetime, timedelta

from fastapi import APIRouter, HTTPException, Response

from salon.api.deps import Appointments, Catalog, CurrentUser
from salon.schemas.appointment import (
    AppointmentCreate,
    AppointmentMerge,
    AppointmentResponse,
    AppointmentUpdate,
    BookingResponse,
)
from salon.services.auth_service import AuthContext
from salon.utils import utcnow, to_naive_utc

router = APIRouter()

DEFAULT_HISTORY_WINDOW = timedelta(days=30)


def ensure_owner(user: AuthContext, owner_id: int) -> None:
    if not user.is_admin and owner_id != user.user_id:
        raise HTTPException(status_code=403, detail="you can only manage your own appointments")


@router.post("/", response_model=BookingResponse, status_code=201)
async def create_appointment(
    appointment_data: AppointmentCreate,
    user: CurrentUser,
    appointments: Appointments,
    catalog: Catalog,
    response: Response,
):
    """Book one or more services.

    When the customer already has a pending appointment that week, it is
    returned as ``suggestion`` so the new services can be merged into it.
    """
    if appointment_data.date < utcnow():
        raise HTTPException(status_code=400, detail="appointment date cannot be in the past")

    owner_id = user.user_id
    if user.is_admin and appointment_data.user_id is not None:
        owner_id = appointment_data.user_id

    services = await catalog.resolve(appointment_data.service_ids)
    created, suggestion = await appointments.create_appointment(
        owner_id, services, appointment_data.date
    )
    if created is None:
        response.status_code = 200
    return BookingResponse(appointment=created, suggestion=suggestion)


@router.get("/", response_model=list[AppointmentResponse])
async def list_appointments(
    user: CurrentUser,
    appointments: Appointments,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
):
    """List appointments in a period (default: one month either side of now).

    Admins see every appointment, customers only their own.
    """
    now = utcnow()
    start = to_naive_utc(start_date) if start_date else now - DEFAULT_HISTORY_WINDOW
    end = to_naive_utc(end_date) if end_date else now + DEFAULT_HISTORY_WINDOW

    history = await appointments.list_history(start, end)
    if user.is_admin:
        return history
    return [ap for ap in history if ap.user_id == user.user_id]


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(appointment_id: int, user: CurrentUser, appointments: Appointments):
    """Get an appointment by ID."""
    appointment = await appointments.get_appointment(appointment_id)
    ensure_owner(user, appointment.user_id)
    return appointment


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    user: CurrentUser,
    appointments: Appointments,
    catalog: Catalog,
):
    """Replace an appointment; allowed until two days before it.

    Returns the appointment as it was before the change. Only admins may
    change the status here; customers keep the current one.
    """
    ensure_owner(user, appointment_data.user_id)
    existing = await appointments.get_appointment(appointment_id)
    ensure_owner(user, existing.user_id)

    status = existing.status
    if user.is_admin and appointment_data.status is not None:
        status = appointment_data.status

    services = await catalog.resolve(appointment_data.service_ids)
    data = AppointmentResponse(
        id=appointment_id,
        user_id=appointment_data.user_id,
        services=services,
        date=appointment_data.date,
        status=status,
    )
    return await appointments.update_appointment(appointment_id, data)


@router.post("/{appointment_id}/cancel", response_model=AppointmentResponse)
async def cancel_appointment(appointment_id: int, user: CurrentUser, appointments: Appointments):
    """Cancel an appointment (status change, never a delete)."""
    existing = await appointments.get_appointment(appointment_id)
    ensure_owner(user, existing.user_id)
    return await appointments.cancel_appointment(appointment_id)


@router.post("/{appointment_id}/merge", response_model=AppointmentResponse)
async def merge_appointments(
    appointment_id: int,
    merge_data: AppointmentMerge,
    user: CurrentUser,
    appointments: Appointments,
    catalog: Catalog,
):
    """Append services to an existing appointment."""
    if not merge_data.service_ids:
        raise HTTPException(status_code=400, detail="at least one service must be provided")

    existing = await appointments.get_appointment(appointment_id)
    ensure_owner(user, existing.user_id)

    services = await catalog.resolve(merge_data.service_ids)
    return await appointments.merge_appointments(appointment_id, services)
