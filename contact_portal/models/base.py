import uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, DateTime
from datetime import datetime

Base = declarative_base()


class TimestampMixin:
    """Mixin for timestamp columns"""
    __abstract__ = True
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


def parse_record_id(record_id: str) -> str:
    """Return the canonical form of a record id (a UUID4 string).

    Raises:
        ValueError: If the id is not a UUID.
    """
    return str(uuid.UUID(record_id))

__all__ = ["Base", "TimestampMixin", "parse_record_id"]
