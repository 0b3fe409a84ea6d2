"""SQLAlchemy ORM model for one key of the key-value store."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from legal_platform.infrastructure.database.base import Base


class StorageEntryModel(Base):
    """ORM model — maps to the 'storage_entries' table.

    ``value`` holds a complete JSON document (an array for collections,
    an object or plain string for the session keys).
    """

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<StorageEntryModel(key='{self.key}', size={len(self.value)})>"
