from salon.schemas.user import UserCreate, AdminUserCreate, UserUpdate, UserResponse
from salon.schemas.service import ServiceCreate, ServiceUpdate, ServiceResponse
from salon.schemas.appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentMerge,
    AppointmentStatusChange,
    AppointmentResponse,
    BookingResponse,
    WeeklyPerformanceResponse,
)
from salon.schemas.auth import (
    LoginRequest,
    UserInfo,
    TokenResponse,
    ValidateTokenResponse,
    RefreshTokenResponse,
)

__all__ = [
    "UserCreate",
    "AdminUserCreate",
    "UserUpdate",
    "UserResponse",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceResponse",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentMerge",
    "AppointmentStatusChange",
    "AppointmentResponse",
    "BookingResponse",
    "WeeklyPerformanceResponse",
    "LoginRequest",
    "UserInfo",
    "TokenResponse",
    "ValidateTokenResponse",
    "RefreshTokenResponse",
]
