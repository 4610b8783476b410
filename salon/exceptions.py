"""Domain errors raised by the service and repository layers.

Routes translate these into HTTP responses; services never return error
values.
"""


class SalonError(Exception):
    """Base class for all domain errors."""


class NoServicesError(SalonError):
    def __init__(self, message: str = "appointment must have at least one service"):
        super().__init__(message)


class NotFoundError(SalonError):
    def __init__(self, entity: str, entity_id: int | str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class TooLateToModifyError(SalonError):
    def __init__(self, message: str = "changes within two days of the appointment must be made by phone"):
        super().__init__(message)


class PersistenceError(SalonError):
    """Wraps any storage-layer failure."""


class ValidationError(SalonError):
    pass


class ConflictError(SalonError):
    pass


class InvalidCredentialsError(SalonError):
    def __init__(self, message: str = "invalid email or password"):
        super().__init__(message)


class InactiveUserError(SalonError):
    def __init__(self, message: str = "user account is inactive"):
        super().__init__(message)


class InvalidTokenError(SalonError):
    def __init__(self, message: str = "invalid token"):
        super().__init__(message)


class PermissionDeniedError(SalonError):
    def __init__(self, message: str = "user role not authorized for this action"):
        super().__init__(message)
