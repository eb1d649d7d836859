"""Tests for calendar-day parsing."""

from datetime import date, datetime

import pytest

from marche_covid.core.dates import parse_day, to_day, validate_range
from marche_covid.core.errors import InvalidDate, InvalidDateRange


def test_to_day_truncates_time():
    """Test that time components are dropped."""
    assert to_day("2020-03-10T18:00:00") == date(2020, 3, 10)
    assert to_day(datetime(2020, 3, 10, 23, 59)) == date(2020, 3, 10)
    assert to_day(date(2020, 3, 10)) == date(2020, 3, 10)


def test_to_day_is_strict():
    """Test that only YYYY-MM-DD strings are accepted."""
    padded = [" 2020-03-10", "2020-03-10 ", "2020-03-10\n", "2020-03-1\u0661"]
    for value in padded + ["2020-3-10", "20200310", "10/03/2020", "2020-02-30", "", "latest"]:
        with pytest.raises(InvalidDate):
            to_day(value)


def test_parse_day_does_not_raise():
    """Test that unparsable values give None."""
    assert parse_day("not-a-date") is None
    assert parse_day(None) is None
    assert parse_day("2020-03-10") == date(2020, 3, 10)


def test_validate_range():
    """Test range validation."""
    assert validate_range("2020-03-10", "2020-03-10") == (date(2020, 3, 10), date(2020, 3, 10))
    with pytest.raises(InvalidDateRange):
        validate_range("2020-03-11", "2020-03-10")
