"""Derived statistics over the daily report series."""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from marche_covid.core.date_range import ONE_DAY, filter_by_range, find_prior_day
from marche_covid.core.dates import DayLike, parse_day
from marche_covid.core.store import ReportStore
from marche_covid.models.report import DailyReport
from marche_covid.models.statistics import CumulativeTotals, SeriesPoint

logger = logging.getLogger(__name__)

MOVING_AVERAGE_WINDOW = 7


def round_half_away(value: float, digits: int = 2) -> float:
    """Round the exact binary value of a float, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class StatisticsEngine:
    """Daily series and scalar aggregates computed from a ReportStore."""

    def __init__(self, store: ReportStore):
        self.store = store

    def reports_in_range(self, start: DayLike, end: DayLike) -> List[DailyReport]:
        return filter_by_range(self.store.snapshot(), start, end)

    def new_positives_series(self, start: DayLike, end: DayLike) -> List[SeriesPoint]:
        """Daily new positives, read straight from each report."""
        return [SeriesPoint(r.day, r.new_positives) for r in self.reports_in_range(start, end)]

    def new_recovered_series(self, start: DayLike, end: DayLike) -> List[SeriesPoint]:
        return self._delta_series("recovered", start, end)

    def new_deceased_series(self, start: DayLike, end: DayLike) -> List[SeriesPoint]:
        return self._delta_series("deceased", start, end)

    def _delta_series(self, field: str, start: DayLike, end: DayLike) -> List[SeriesPoint]:
        """
        Day-over-day change of a cumulative field.

        The previous day is looked up in the whole series, so the first point
        of a range still gets a real delta. Without a previous day the report's
        own cumulative value counts as new.
        """
        series = self.store.snapshot()
        points = []
        for report in filter_by_range(series, start, end):
            value = getattr(report, field)
            prior = find_prior_day(series, report)
            if prior is not None:
                value -= getattr(prior, field)
            points.append(SeriesPoint(report.day, value))
        return points

    def moving_average_7(self, start: DayLike, end: DayLike) -> List[SeriesPoint]:
        """
        7-report moving average of new positives for each report in range.

        Windows reach back before start; near the beginning of the series
        they hold fewer than 7 reports.
        """
        start_day = parse_day(start)
        end_day = parse_day(end)
        if start_day is None or end_day is None or start_day > end_day:
            return []
        series = self.store.snapshot()
        points = []
        for index, report in enumerate(series):
            if not start_day <= report.day <= end_day:
                continue
            window = series[max(0, index - MOVING_AVERAGE_WINDOW + 1):index + 1]
            average = sum(r.new_positives for r in window) / len(window)
            points.append(SeriesPoint(report.day, round_half_away(average)))
        return points

    def positivity_rate(self, start: DayLike, end: DayLike) -> List[SeriesPoint]:
        """
        Daily new positives over new swabs, as a percentage.

        New swabs are the difference with the preceding report of a window
        opened one day before start; the first report of that window has no
        predecessor and counts all its swabs as new. Days without new swabs
        get a rate of 0.
        """
        start_day = parse_day(start)
        end_day = parse_day(end)
        if start_day is None or end_day is None or start_day > end_day:
            return []
        window = filter_by_range(self.store.snapshot(), start_day - ONE_DAY, end_day)
        points = []
        previous_swabs = 0
        for report in window:
            new_swabs = report.swabs - previous_swabs
            previous_swabs = report.swabs
            if report.day < start_day:
                continue
            rate = report.new_positives / new_swabs * 100 if new_swabs > 0 else 0
            points.append(SeriesPoint(report.day, round_half_away(rate)))
        return points

    def latest_report(self) -> DailyReport:
        return self.store.latest()

    def lethality_rate(self) -> float:
        """Cumulative deaths over cumulative cases of the latest report, as a percentage."""
        latest = self.store.latest()
        if latest.total_cases == 0:
            logger.warning(f"Latest report {latest.day} has no cases, lethality rate is 0")
            return 0.0
        return round_half_away(latest.deceased / latest.total_cases * 100)

    def latest_cumulative_totals(self) -> CumulativeTotals:
        latest = self.store.latest()
        return CumulativeTotals(
            day=latest.day,
            total_cases=latest.total_cases,
            recovered=latest.recovered,
            deceased=latest.deceased,
        )

