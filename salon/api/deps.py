"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from salon.config import get_settings
from salon.database import get_db
from salon.exceptions import InvalidTokenError, PermissionDeniedError
from salon.models.user import UserRole
from salon.repositories import SQLAppointmentRepository, ServiceRepository, UserRepository
from salon.services import AppointmentService, AuthContext, AuthService, CatalogService, UserService

DBSession = Annotated[AsyncSession, Depends(get_db)]

security = HTTPBearer(auto_error=False)


def get_auth_service() -> AuthService:
    settings = get_settings()
    return AuthService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_hours=settings.token_expire_hours,
    )


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_appointment_service(db: DBSession) -> AppointmentService:
    settings = get_settings()
    return AppointmentService(
        SQLAppointmentRepository(db),
        modification_cutoff=settings.modification_cutoff,
        suggestion_mode=settings.suggestion_mode,
        week_lookup_failure=settings.week_lookup_failure,
    )


def get_catalog_service(db: DBSession) -> CatalogService:
    return CatalogService(ServiceRepository(db))


def get_user_service(db: DBSession) -> UserService:
    return UserService(UserRepository(db))


Appointments = Annotated[AppointmentService, Depends(get_appointment_service)]
Catalog = Annotated[CatalogService, Depends(get_catalog_service)]
Users = Annotated[UserService, Depends(get_user_service)]


def bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    if credentials is None:
        raise HTTPException(status_code=401, detail="missing authorization header")
    return credentials.credentials


def get_current_user(
    token: Annotated[str, Depends(bearer_token)],
    auth: AuthServiceDep,
) -> AuthContext:
    try:
        return auth.decode_token(token)
    except InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=str(e))


CurrentUser = Annotated[AuthContext, Depends(get_current_user)]


def require_admin(user: CurrentUser, auth: AuthServiceDep) -> AuthContext:
    try:
        return auth.require_role(user, UserRole.ADMIN)
    except PermissionDeniedError:
        raise HTTPException(status_code=403, detail="admin access required")


AdminUser = Annotated[AuthContext, Depends(require_admin)]
