"""Path parameter validators shared by the routers."""

from datetime import date
from typing import Tuple

from fastapi import HTTPException

from marche_covid.core.dates import to_day, validate_range
from marche_covid.core.errors import InvalidDate, InvalidDateRange


def _strict_day(value: str, detail: str) -> date:
    # to_day tolerates a trailing time part, path parameters must not carry one
    if "T" in value:
        raise HTTPException(status_code=400, detail=detail)
    try:
        return to_day(value)
    except InvalidDate:
        raise HTTPException(status_code=400, detail=detail)


def valid_day(day: str) -> date:
    """Strict YYYY-MM-DD day from the path."""
    return _strict_day(day, "Invalid date")


def valid_range(start: str, end: str) -> Tuple[date, date]:
    """Strict YYYY-MM-DD range from the path, start not after end."""
    start_day = _strict_day(start, "Invalid start date")
    end_day = _strict_day(end, "Invalid end date")
    try:
        return validate_range(start_day, end_day)
    except InvalidDateRange as e:
        raise HTTPException(status_code=400, detail=str(e))
