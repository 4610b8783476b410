"""Auth service - password hashing and bearer tokens."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from salon.exceptions import InvalidTokenError, PermissionDeniedError
from salon.models.user import User, UserRole

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Expired tokens can still be refreshed within this window
REFRESH_GRACE = timedelta(days=7)


@dataclass(frozen=True)
class AuthContext:
    """Identity resolved from a bearer token."""
    user_id: int
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class AuthService:
    """Issues and validates HS256 tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_hours: int = 24):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = timedelta(hours=expire_hours)

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    def create_token(self, user: User) -> str:
        if not user.id:
            raise ValueError("invalid user: missing ID")
        return self._encode(user.id, user.email, UserRole(user.role))

    def decode_token(self, token: str) -> AuthContext:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification failed: {e}")
            raise InvalidTokenError() from e
        return self._context(payload)

    def require_role(self, context: AuthContext, *allowed_roles: UserRole) -> AuthContext:
        """Pass through when no roles are given or the context holds one of them."""
        if allowed_roles and context.role not in allowed_roles:
            raise PermissionDeniedError()
        return context

    def refresh_token(self, token: str) -> str:
        """Re-issue a validly signed token, even one that expired up to a week ago."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError() from e

        expires_at = payload.get("exp")
        if expires_at is not None:
            expired_for = datetime.now(timezone.utc) - datetime.fromtimestamp(expires_at, timezone.utc)
            if expired_for > REFRESH_GRACE:
                raise InvalidTokenError("token too old to refresh")

        context = self._context(payload)
        return self._encode(context.user_id, context.email, context.role)

    def _encode(self, user_id: int, email: str, role: UserRole) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "user_id": user_id,
            "email": email,
            "role": role.value,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    @staticmethod
    def _context(payload: dict) -> AuthContext:
        try:
            return AuthContext(
                user_id=int(payload["user_id"]),
                email=payload.get("email", ""),
                role=UserRole(payload["role"]),
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError() from e
