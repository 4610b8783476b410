"""Services package - Business logic layer."""

from salon.services.appointment_service import AppointmentService, BookingResult, WeeklyPerformance
from salon.services.auth_service import AuthContext, AuthService
from salon.services.catalog_service import CatalogService
from salon.services.user_service import UserService

__all__ = [
    "AppointmentService",
    "BookingResult",
    "WeeklyPerformance",
    "AuthContext",
    "AuthService",
    "CatalogService",
    "UserService",
]
