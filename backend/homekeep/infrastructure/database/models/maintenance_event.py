"""SQLAlchemy ORM model for the MaintenanceEvent entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from homekeep.infrastructure.database.base import Base


class MaintenanceEventModel(Base):
    """ORM model: maps to the 'maintenance_events' table."""

    __tablename__ = "maintenance_events"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    cost: Mapped[str | None] = mapped_column(String(50), nullable=True)
    photo_ids: Mapped[list[int] | None] = mapped_column(JSON, nullable=True)
    receipt_photo_ids: Mapped[list[int] | None] = mapped_column(JSON, nullable=True)
    category_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<MaintenanceEventModel(id={self.id}, title='{self.title}')>"
