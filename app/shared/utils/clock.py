# 📄 File: app/shared/utils/clock.py

# 🧭 Purpose (Layman Explanation):
# Tells the app what time it is and which timezone a user lives in, so care reminders
# line up with the user's own calendar days instead of the server's.

# 🧪 Purpose (Technical Summary):
# Clock abstraction (system and fixed clocks) plus IANA timezone resolution and
# timestamp normalization helpers used by the care scheduling engine.

# 🔗 Dependencies:
# - zoneinfo: IANA timezone database
# - pydantic: Timestamp field type
# - app.shared.core.exceptions (InvalidConfigError)

# 🔄 Connected Modules / Calls From:
# care_management domain services and handlers, background jobs, API dependencies

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Annotated, Optional, Protocol, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AfterValidator

from app.shared.core.exceptions import InvalidConfigError

TimezoneLike = Union[str, tzinfo]


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock backed by the system time, always returning aware UTC instants."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self._instant = ensure_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def advance(self, **delta) -> None:
        self._instant = self._instant + timedelta(**delta)


def ensure_aware(value: datetime) -> datetime:
    """Interpret a naive datetime as UTC; aware datetimes are returned unchanged."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def resolve_timezone(tz: Optional[TimezoneLike], default: str = "UTC") -> tzinfo:
    """
    Resolve an IANA timezone name (or pass through a tzinfo).

    Raises:
        InvalidConfigError: If the name is not a known IANA timezone
    """
    if tz is None:
        tz = default
    if isinstance(tz, tzinfo):
        return tz

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidConfigError(
            message=f"Unknown timezone: {tz}",
            field="timezone",
            value=tz,
        )


# Timestamp field type for domain records: naive values are read as UTC.
Timestamp = Annotated[datetime, AfterValidator(ensure_aware)]
