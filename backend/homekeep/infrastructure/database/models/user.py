"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from homekeep.infrastructure.database.base import Base


class UserModel(Base):
    """ORM model: maps to the 'users' table."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username='{self.username}')>"
