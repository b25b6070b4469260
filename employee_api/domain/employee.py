"""
Employee value types.

Storage keeps `date_created` as integer seconds since the Unix epoch; in memory
it is an aware UTC datetime, or None for a record that was never persisted.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Optional

from .errors import ValidationError


@dataclass
class Employee:
    id: int = 0
    name: str = ""
    position: str = ""
    salary: float = 0.0
    date_created: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# SQLite INTEGER range
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Returned at the HTTP boundary when a lookup finds nothing.
ZERO_EMPLOYEE = Employee()


@dataclass(frozen=True)
class PaginationParams:
    page: int
    count: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.count

    def validate(self) -> None:
        if self.page <= 0 or self.count <= 0:
            raise ValidationError("page and count fields are required and must be > 0")
        if self.offset + self.count > INT64_MAX:
            raise ValidationError("page and count select a window beyond the table range")


def ts_to_datetime(ts: int) -> datetime:
    return datetime.fromtimestamp(int(ts), tz=timezone.utc)


def datetime_to_ts(value: datetime) -> int:
    # naive datetimes are taken as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def storable_ts(value: datetime) -> int:
    """Epoch seconds for `value`, checked to decode back into a datetime."""
    try:
        ts = datetime_to_ts(value)
        ts_to_datetime(ts)
    except (ValueError, OverflowError, OSError) as e:
        raise ValidationError(f"date_created out of range: {value.isoformat()}") from e
    return ts
