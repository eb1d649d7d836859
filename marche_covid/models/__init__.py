"""Data models."""

from marche_covid.models.report import DailyReport
from marche_covid.models.statistics import CumulativeTotals, SeriesPoint

__all__ = [
    "DailyReport",
    "SeriesPoint",
    "CumulativeTotals",
]
