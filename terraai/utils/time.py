from datetime import date, datetime, timezone
from typing import Callable, Union

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def parse_date(s: str | None) -> datetime:
    if not s:
        return utcnow()
    dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def format_date_for_gibs(when: Union[date, datetime, None] = None, clock: Callable[[], datetime] = utcnow) -> str:
    """YYYY-MM-DD in UTC; naive datetimes are taken as UTC."""
    if when is None:
        when = clock()
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            when = when.astimezone(timezone.utc)
        return when.strftime("%Y-%m-%d")
    return when.isoformat()
