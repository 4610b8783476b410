"""Translate domain errors into HTTP responses."""

from salon.exceptions import (
    ConflictError,
    InactiveUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    NoServicesError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    SalonError,
    TooLateToModifyError,
    ValidationError,
)

STATUS_CODES: dict[type[SalonError], int] = {
    NoServicesError: 400,
    ValidationError: 400,
    InvalidCredentialsError: 401,
    InactiveUserError: 401,
    InvalidTokenError: 401,
    PermissionDeniedError: 403,
    TooLateToModifyError: 403,
    NotFoundError: 404,
    ConflictError: 409,
    PersistenceError: 500,
}


def status_for(error: SalonError) -> int:
    for error_type, status_code in STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 500
