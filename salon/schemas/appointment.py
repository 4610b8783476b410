from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from salon.models.appointment import AppointmentStatus
from salon.schemas.service import ServiceResponse
from salon.utils import to_naive_utc


class AppointmentResponse(BaseModel):
    """Appointment record exchanged with the repository and returned by the API."""
    id: int | None = None
    user_id: int
    services: list[ServiceResponse] = Field(default_factory=list)
    date: datetime
    status: AppointmentStatus = AppointmentStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment."""
    service_ids: list[int] = Field(..., description="Catalog services to book, in order")
    date: datetime = Field(..., description="Scheduled date and time")
    user_id: int | None = Field(None, description="Customer to book for (admins only)")

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class AppointmentUpdate(BaseModel):
    """Schema for replacing an appointment's data."""
    user_id: int
    service_ids: list[int]
    date: datetime
    status: AppointmentStatus | None = Field(
        None, description="Admins only; the current status is kept when omitted"
    )

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class AppointmentMerge(BaseModel):
    """Schema for merging extra services into an appointment."""
    service_ids: list[int] = Field(..., description="Services appended after the existing ones")


class AppointmentStatusChange(BaseModel):
    """Schema for an operational status change."""
    status: AppointmentStatus


class BookingResponse(BaseModel):
    """Outcome of a booking request."""
    appointment: AppointmentResponse | None = None
    suggestion: AppointmentResponse | None = Field(
        None, description="Pending appointment in the same week to merge into"
    )


class WeeklyPerformanceResponse(BaseModel):
    """Appointment counts for the current week."""
    week_start: datetime
    week_end: datetime
    total: int
    completed: int
