"""Admin routes - operational views, reporting and user management."""

from fastapi import APIRouter, Response

from salon.api.deps import AdminUser, Appointments, Users
from salon.schemas.appointment import (
    AppointmentResponse,
    AppointmentStatusChange,
    WeeklyPerformanceResponse,
)
from salon.schemas.user import AdminUserCreate, UserResponse, UserUpdate

router = APIRouter()


@router.get("/incoming", response_model=list[AppointmentResponse])
async def list_incoming(admin: AdminUser, appointments: Appointments):
    """Appointments scheduled over the next seven days."""
    return await appointments.list_incoming()


@router.patch("/appointments/{appointment_id}/status", response_model=AppointmentResponse)
async def change_status(
    appointment_id: int,
    status_data: AppointmentStatusChange,
    admin: AdminUser,
    appointments: Appointments,
):
    """Set an appointment's status."""
    return await appointments.change_status(appointment_id, status_data.status)


@router.post("/appointments/{appointment_id}/confirm", response_model=AppointmentResponse)
async def confirm_appointment(appointment_id: int, admin: AdminUser, appointments: Appointments):
    """Confirm an appointment."""
    return await appointments.confirm_appointment(appointment_id)


@router.get("/weekly-performance", response_model=WeeklyPerformanceResponse)
async def weekly_performance(admin: AdminUser, appointments: Appointments):
    """Total and completed appointments for the current week."""
    performance = await appointments.weekly_performance()
    return WeeklyPerformanceResponse(**performance._asdict())


@router.get("/users", response_model=list[UserResponse])
async def list_users(admin: AdminUser, users: Users):
    """List all users."""
    return await users.list_users()


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(user_data: AdminUserCreate, admin: AdminUser, users: Users):
    """Create a user with any role."""
    return await users.create_user(user_data)


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, admin: AdminUser, users: Users):
    """Get a user by ID."""
    return await users.get_user(user_id)


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, user_data: UserUpdate, admin: AdminUser, users: Users):
    """Update a user."""
    return await users.update_user(user_id, user_data)


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: int, admin: AdminUser, users: Users):
    """Delete a user and their appointments."""
    await users.delete_user(user_id)
    return Response(status_code=204)
