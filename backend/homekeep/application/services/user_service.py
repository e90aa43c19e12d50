"""Application service for users: registration, lookup and password checks."""

from passlib.hash import pbkdf2_sha256

from homekeep.application.interfaces import UserRepository
from homekeep.application.schemas import UserCreate
from homekeep.domain.entities import User
from homekeep.domain.exceptions import DuplicateEntityError, EntityNotFoundError


def hash_password(password: str) -> str:
    """Return a salted ``$pbkdf2-sha256$...`` hash."""
    return pbkdf2_sha256.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pbkdf2_sha256.verify(password, password_hash)
    except ValueError:
        # Not a pbkdf2-sha256 hash at all.
        return False


class UserService:
    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def register(self, data: UserCreate) -> User:
        if await self._repository.get_by_username(data.username) is not None:
            raise DuplicateEntityError("User", "username", data.username)
        user = User(username=data.username, password_hash=hash_password(data.password))
        return await self._repository.create(user)

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def authenticate(self, username: str, password: str) -> User | None:
        """Return the user when the credentials match, otherwise None."""
        user = await self._repository.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user
