# restopos/utils/timezones.py
import calendar
from datetime import date, datetime
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from restopos.core.config import settings

LOCAL_TZ = ZoneInfo(settings.restaurant_timezone)
UTC = ZoneInfo("UTC")


def now_utc() -> datetime:
    return datetime.now(UTC)


def ensure_aware(dt: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    """Naive datetimes are read as restaurant-local wall time."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz or LOCAL_TZ)
    return dt


def to_local(dt: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    return ensure_aware(dt, tz).astimezone(tz or LOCAL_TZ)


def local_today(now: Optional[datetime] = None, tz: Optional[ZoneInfo] = None) -> date:
    return to_local(now or now_utc(), tz).date()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def parse_month(value: str) -> Tuple[int, int]:
    """'YYYY-MM' -> (year, month). Raises ValueError on anything else."""
    try:
        year_s, month_s = value.strip().split("-")
        year, month = int(year_s), int(month_s)
    except (AttributeError, ValueError):
        raise ValueError(f"Expected YYYY-MM, got {value!r}")
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {value!r}")
    return year, month


def parse_date_input(value) -> datetime:
    """
    Accepts a datetime, a date, or an ISO string ('YYYY-MM-DD' or full
    timestamp). Date-only values become local midnight.
    """
    if isinstance(value, datetime):
        return ensure_aware(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=LOCAL_TZ)
    if isinstance(value, str):
        s = value.strip()
        if len(s) == 10:
            d = date.fromisoformat(s)
            return datetime(d.year, d.month, d.day, tzinfo=LOCAL_TZ)
        return ensure_aware(datetime.fromisoformat(s.replace("Z", "+00:00")))
    raise ValueError(f"Unsupported date value: {value!r}")
