"""Calendar-day parsing helpers."""

import re
from datetime import date, datetime
from typing import Optional, Union

from marche_covid.core.errors import InvalidDate, InvalidDateRange

DAY_FORMAT = "%Y-%m-%d"
_DAY_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

DayLike = Union[date, datetime, str]


def to_day(value: DayLike) -> date:
    """
    Reduce a day-like value to a calendar date.

    Datetimes lose their time component; strings must be strict YYYY-MM-DD,
    optionally followed by a "T..." time part which is ignored.
    Raises InvalidDate for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        head = value.split("T", 1)[0]
        if _DAY_RE.fullmatch(head):
            try:
                return datetime.strptime(head, DAY_FORMAT).date()
            except ValueError:
                pass
    raise InvalidDate(f"Invalid date: {value!r}")


def parse_day(value: DayLike) -> Optional[date]:
    """Same as to_day, but returns None instead of raising."""
    try:
        return to_day(value)
    except InvalidDate:
        return None


def validate_range(start: DayLike, end: DayLike) -> tuple:
    """Parse both ends of a range and require start <= end."""
    start_day = to_day(start)
    end_day = to_day(end)
    if start_day > end_day:
        raise InvalidDateRange(
            f"Invalid date range: {start_day.isoformat()} is after {end_day.isoformat()}"
        )
    return start_day, end_day
