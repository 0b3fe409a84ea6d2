"""SQLAlchemy declarative base for the storage tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models of the key-value store."""
