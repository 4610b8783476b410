from salon.models.user import User, UserRole
from salon.models.service import Service
from salon.models.appointment import Appointment, AppointmentServiceLink, AppointmentStatus

__all__ = [
    "User",
    "UserRole",
    "Service",
    "Appointment",
    "AppointmentServiceLink",
    "AppointmentStatus",
]
