"""SQLAlchemy ORM model for the Category entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from homekeep.infrastructure.database.base import Base


class CategoryModel(Base):
    """ORM model: maps to the 'categories' table."""

    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(16), nullable=False)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}')>"
