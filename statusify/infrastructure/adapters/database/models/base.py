from datetime import UTC
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy import Dialect
from sqlalchemy import TypeDecorator
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import MappedAsDataclass
from sqlalchemy.orm import mapped_column


class UTCDateTime(TypeDecorator[datetime]):
    """A timezone aware datetime, always stored and read back in UTC.

    Naive values are assumed to be UTC, as drivers without timezone support (e.g.
    SQLite) hand them back.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        return _as_utc(value)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        return _as_utc(value)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class Base(MappedAsDataclass, AsyncAttrs, DeclarativeBase, kw_only=True):
    """Base class for all SQLAlchemy declarative models in the application.

    This class combines:
      - `MappedAsDataclass` for dataclass-like behavior
      - `AsyncAttrs` for asynchronous attribute access
      - `DeclarativeBase` to enable declarative mapping of Python classes to database tables.
    """

    pass


class DatetimeTrackMixin(MappedAsDataclass, kw_only=True):
    """Adds `created_at` and `updated_at` timestamps, refreshed on each modification."""

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        server_default=func.now(),
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sort_order=998,
        init=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        server_default=func.now(),
        onupdate=func.now(),
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sort_order=999,
        init=False,
    )
