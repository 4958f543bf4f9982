"""
timestamp normalization for bmkg local and analysis times
"""

from datetime import datetime, timedelta, timezone
from typing import Union

from config import LOCAL_UTC_OFFSET_HOURS

LOCAL_FORMAT = "%Y-%m-%d %H:%M:%S"
LOCAL_TZ = timezone(timedelta(hours=LOCAL_UTC_OFFSET_HOURS))


def normalize_local(value: str) -> datetime:
    """
    attach the fixed local offset to a bare `YYYY-MM-DD HH:mm:ss` string

    args:
        value: local wall-clock time without zone marker

    returns:
        timezone-aware datetime at +07:00

    raises:
        ValueError: if value does not have the expected shape
    """
    return datetime.strptime(value, LOCAL_FORMAT).replace(tzinfo=LOCAL_TZ)


def ensure_utc_marker(value: str) -> str:
    """append the `Z` zone marker unless already present"""
    return value if value.endswith("Z") else f"{value}Z"


def normalize_analysis(value: Union[str, datetime]) -> datetime:
    """
    parse an analysis timestamp as utc, tolerating a missing `Z`

    args:
        value: iso timestamp string, or an already normalized datetime

    returns:
        timezone-aware datetime in utc

    raises:
        ValueError: if the string is not an iso timestamp; strings that
            already carry a non-`Z` offset are rejected, not reinterpreted
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    marked = ensure_utc_marker(value.strip())
    # a pre-existing offset such as +00:00 ends up doubled and fails here
    return datetime.fromisoformat(marked[:-1] + "+00:00")
