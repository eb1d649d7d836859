"""Date range filtering and prior-day alignment over a report series."""

from datetime import timedelta
from typing import Iterable, List, Optional

from marche_covid.core.dates import DayLike, parse_day
from marche_covid.core.store import ReportSeries
from marche_covid.models.report import DailyReport

ONE_DAY = timedelta(days=1)


def filter_by_range(reports: Iterable[DailyReport], start: DayLike, end: DayLike) -> List[DailyReport]:
    """
    Reports whose calendar day falls in [start, end], in input order.

    Bounds that do not parse, or start > end, give an empty list.
    """
    start_day = parse_day(start)
    end_day = parse_day(end)
    if start_day is None or end_day is None or start_day > end_day:
        return []
    return [r for r in reports if start_day <= r.day <= end_day]


def find_prior_day(series: ReportSeries, report: DailyReport) -> Optional[DailyReport]:
    """Report for the calendar day before report's, looked up in the full series."""
    return series.get(report.day - ONE_DAY)
