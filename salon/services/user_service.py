"""User service - Business logic for accounts."""

from salon.exceptions import ConflictError, InactiveUserError, InvalidCredentialsError
from salon.models.user import User, UserRole
from salon.repositories.user_repository import UserRepository
from salon.schemas.user import AdminUserCreate, UserCreate, UserUpdate
from salon.services.auth_service import AuthService


class UserService:
    """Service class for user operations."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, user_data: UserCreate) -> User:
        """Create a customer account; registrations never get another role."""
        return await self._create(user_data, UserRole.CUSTOMER)

    async def create_user(self, user_data: AdminUserCreate) -> User:
        return await self._create(user_data, user_data.role)

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError()
        if not user.is_active:
            raise InactiveUserError()
        if not AuthService.verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    async def get_user(self, user_id: int) -> User:
        return await self.repo.find_by_id(user_id)

    async def list_users(self) -> list[User]:
        return await self.repo.find_all()

    async def update_user(self, user_id: int, user_data: UserUpdate) -> User:
        user = await self.repo.find_by_id(user_id)
        update_data = user_data.model_dump(exclude_unset=True)
        password = update_data.pop("password", None)
        if password:
            user.password_hash = AuthService.hash_password(password)
        for field, value in update_data.items():
            if value is None:
                continue
            if field == "role":
                value = UserRole(value).value
            setattr(user, field, value)
        return await self.repo.update(user)

    async def delete_user(self, user_id: int) -> None:
        user = await self.repo.find_by_id(user_id)
        await self.repo.delete(user)

    async def _create(self, user_data: UserCreate, role: UserRole) -> User:
        if await self.repo.find_by_email(user_data.email):
            raise ConflictError("email already registered")
        user = User(
            email=user_data.email,
            password_hash=AuthService.hash_password(user_data.password),
            name=user_data.name,
            phone=user_data.phone,
            role=role.value,
            is_active=True,
        )
        return await self.repo.create(user)
