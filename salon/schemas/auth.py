from pydantic import BaseModel, EmailStr, Field

from salon.models.user import UserRole


class LoginRequest(BaseModel):
    """Credentials for login."""
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserInfo(BaseModel):
    """Public user details embedded in token responses."""
    id: int
    email: str
    name: str
    role: UserRole

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """Issued token plus the user it belongs to."""
    token: str
    user: UserInfo


class ValidateTokenResponse(BaseModel):
    valid: bool
    user_id: int | None = None
    email: str | None = None
    role: UserRole | None = None


class RefreshTokenResponse(BaseModel):
    token: str
