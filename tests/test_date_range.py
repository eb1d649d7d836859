"""Tests for range filtering and prior-day alignment."""

from datetime import date

from marche_covid.core.date_range import filter_by_range, find_prior_day
from marche_covid.core.store import ReportSeries

from tests.conftest import make_report


def test_filter_by_range_inclusive(reports):
    """Test that both bounds are included and order is kept."""
    result = filter_by_range(reports, "2020-03-09", "2020-03-11")
    assert [r.day.isoformat() for r in result] == ["2020-03-09", "2020-03-10", "2020-03-11"]


def test_filter_by_range_ignores_time_of_day(reports):
    """Test that an 18:00 report matches a single-day range."""
    result = filter_by_range(reports, date(2020, 3, 12), date(2020, 3, 12))
    assert len(result) == 1
    assert result[0].reported_at.hour == 18


def test_filter_by_range_empty_results(reports):
    """Test the cases that give an empty list."""
    assert filter_by_range(reports, "2021-01-01", "2021-01-31") == []
    assert filter_by_range([], "2020-03-08", "2020-03-12") == []
    assert filter_by_range(reports, "2020-03-12", "2020-03-08") == []
    assert filter_by_range(reports, "garbage", "2020-03-12") == []


def test_find_prior_day(reports):
    """Test prior-day lookup against the full series."""
    series = ReportSeries(reports)
    assert find_prior_day(series, reports[2]) is reports[1]
    assert find_prior_day(series, reports[0]) is None


def test_find_prior_day_with_gap():
    """Test that a gap in the series gives no prior day."""
    first = make_report("2020-03-01")
    third = make_report("2020-03-03")
    series = ReportSeries([first, third])
    assert find_prior_day(series, third) is None
