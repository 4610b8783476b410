"""Auth routes - registration, login and token maintenance."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from salon.api.deps import AuthServiceDep, Users, bearer_token
from salon.exceptions import InvalidTokenError
from salon.schemas.auth import (
    LoginRequest,
    RefreshTokenResponse,
    TokenResponse,
    UserInfo,
    ValidateTokenResponse,
)
from salon.schemas.user import UserCreate

router = APIRouter()

BearerToken = Annotated[str, Depends(bearer_token)]


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(user_data: UserCreate, users: Users, auth: AuthServiceDep):
    """Create a customer account and return a token."""
    user = await users.register(user_data)
    return TokenResponse(token=auth.create_token(user), user=UserInfo.model_validate(user))


@router.post("/login", response_model=TokenResponse)
async def login(credentials: LoginRequest, users: Users, auth: AuthServiceDep):
    """Authenticate and return a token."""
    user = await users.authenticate(credentials.email, credentials.password)
    return TokenResponse(token=auth.create_token(user), user=UserInfo.model_validate(user))


@router.get("/validate", response_model=ValidateTokenResponse)
async def validate_token(token: BearerToken, auth: AuthServiceDep):
    """Report whether the bearer token is valid."""
    try:
        context = auth.decode_token(token)
    except InvalidTokenError:
        return JSONResponse(status_code=401, content={"valid": False})
    return ValidateTokenResponse(
        valid=True,
        user_id=context.user_id,
        email=context.email,
        role=context.role,
    )


@router.post("/refresh", response_model=RefreshTokenResponse)
async def refresh_token(token: BearerToken, auth: AuthServiceDep):
    """Issue a fresh token from a recently expired one."""
    return RefreshTokenResponse(token=auth.refresh_token(token))
