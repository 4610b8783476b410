"""User repository - persistence for accounts."""

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salon.models.appointment import Appointment, AppointmentServiceLink
from salon.models.user import User
from salon.exceptions import NotFoundError, PersistenceError


class UserRepository:
    """Account storage backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> User:
        try:
            self.db.add(user)
            await self.db.flush()
            await self.db.refresh(user)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to create user: {e}") from e
        return user

    async def find_by_id(self, user_id: int) -> User:
        try:
            user = await self.db.get(User, user_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to load user {user_id}: {e}") from e
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    async def find_by_email(self, email: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to look up user by email: {e}") from e
        return result.scalar_one_or_none()

    async def find_all(self) -> list[User]:
        try:
            result = await self.db.execute(select(User).order_by(User.id))
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to list users: {e}") from e
        return list(result.scalars().all())

    async def update(self, user: User) -> User:
        try:
            await self.db.flush()
            await self.db.refresh(user)
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to update user {user.id}: {e}") from e
        return user

    async def delete(self, user: User) -> None:
        """Delete a user together with their appointments."""
        appointment_ids = select(Appointment.id).where(Appointment.user_id == user.id)
        try:
            await self.db.execute(
                delete(AppointmentServiceLink).where(
                    AppointmentServiceLink.appointment_id.in_(appointment_ids)
                )
            )
            await self.db.execute(delete(Appointment).where(Appointment.user_id == user.id))
            await self.db.execute(delete(User).where(User.id == user.id))
            self.db.expunge(user)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to delete user {user.id}: {e}") from e
