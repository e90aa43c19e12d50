"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.application.interfaces import UserRepository
from homekeep.domain.entities import User
from homekeep.infrastructure.database.models import UserModel
from homekeep.infrastructure.database.repositories.records import storable_id


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(id=model.id, username=model.username, password_hash=model.password_hash)

    async def get_by_id(self, user_id: int) -> User | None:
        if not storable_id(user_id):
            return None
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(username=user.username, password_hash=user.password_hash)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
