"""Tests for tokens, password hashing and role checks."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from salon.exceptions import InvalidTokenError, PermissionDeniedError
from salon.models.user import User, UserRole
from salon.services.auth_service import AuthContext, AuthService

SECRET = "test-secret"


@pytest.fixture
def auth():
    return AuthService(secret=SECRET)


def make_user(role: UserRole = UserRole.CUSTOMER) -> User:
    return User(id=7, email="ana@example.com", name="Ana", phone="1", role=role.value, password_hash="x")


def expired_token(expired_for: timedelta) -> str:
    expired_at = datetime.now(timezone.utc) - expired_for
    claims = {
        "user_id": 7,
        "email": "ana@example.com",
        "role": "customer",
        "iat": expired_at - timedelta(hours=24),
        "exp": expired_at,
    }
    return jwt.encode(claims, SECRET, algorithm="HS256")


def test_token_round_trip(auth):
    context = auth.decode_token(auth.create_token(make_user(UserRole.ADMIN)))

    assert context == AuthContext(user_id=7, email="ana@example.com", role=UserRole.ADMIN)
    assert context.is_admin


def test_user_without_id_gets_no_token(auth):
    with pytest.raises(ValueError):
        auth.create_token(User(email="new@example.com", role="customer"))


def test_token_signed_with_other_secret_is_rejected(auth):
    token = AuthService(secret="other").create_token(make_user())

    with pytest.raises(InvalidTokenError):
        auth.decode_token(token)


def test_garbage_token_is_rejected(auth):
    with pytest.raises(InvalidTokenError):
        auth.decode_token("not-a-token")


def test_expired_token_is_rejected(auth):
    with pytest.raises(InvalidTokenError):
        auth.decode_token(expired_token(timedelta(minutes=1)))


def test_recently_expired_token_can_be_refreshed(auth):
    refreshed = auth.refresh_token(expired_token(timedelta(days=1)))

    assert auth.decode_token(refreshed).user_id == 7


def test_token_expired_too_long_ago_cannot_be_refreshed(auth):
    with pytest.raises(InvalidTokenError, match="too old"):
        auth.refresh_token(expired_token(timedelta(days=8)))


def test_require_role(auth):
    customer = AuthContext(user_id=1, email="c@example.com", role=UserRole.CUSTOMER)

    assert auth.require_role(customer) is customer
    assert auth.require_role(customer, UserRole.CUSTOMER, UserRole.ADMIN) is customer
    with pytest.raises(PermissionDeniedError):
        auth.require_role(customer, UserRole.ADMIN)


def test_password_hashing():
    hashed = AuthService.hash_password("secret123")

    assert hashed != "secret123"
    assert AuthService.verify_password("secret123", hashed)
    assert not AuthService.verify_password("wrong-password", hashed)
