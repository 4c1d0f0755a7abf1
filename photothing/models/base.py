"""Base model with common fields and utilities."""
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, DateTime, func
from sqlalchemy.types import TypeDecorator

from photothing.db.base import MAX_ID


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from databases without tz support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def valid_id(value: Any) -> bool:
    """True when ``value`` fits in an id column."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_ID


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always round-trips as UTC.

    SQLite drops the offset on the way in, so values are normalised to UTC
    before binding and tagged as UTC again on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return as_utc(value)


class CreatedAtMixin:
    """Mixin for a created_at timestamp."""

    created_at = Column(UTCDateTime(), default=utcnow, server_default=func.now(), nullable=False)


class TimestampMixin(CreatedAtMixin):
    """Mixin for created_at and updated_at timestamps."""

    updated_at = Column(
        UTCDateTime(), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )
