"""Shared fixtures."""

import pytest

from marche_covid.core.statistics import StatisticsEngine
from marche_covid.core.store import ReportStore
from marche_covid.models.report import DailyReport


def make_report(day, total_cases=0, recovered=0, deceased=0, new_positives=0, swabs=0, **extra):
    """Build a report the way the dataset stores it (18:00 timestamp)."""
    return DailyReport.model_validate(
        {
            "data": f"{day}T18:00:00",
            "totale_casi": total_cases,
            "dimessi_guariti": recovered,
            "deceduti": deceased,
            "nuovi_positivi": new_positives,
            "tamponi": swabs,
            **extra,
        }
    )


@pytest.fixture
def reports():
    return [
        make_report("2020-03-08", total_cases=50, recovered=0, deceased=1, new_positives=20, swabs=60),
        make_report("2020-03-09", total_cases=60, recovered=2, deceased=2, new_positives=10, swabs=80),
        make_report("2020-03-10", total_cases=70, recovered=5, deceased=4, new_positives=10, swabs=100),
        make_report("2020-03-11", total_cases=85, recovered=9, deceased=5, new_positives=15, swabs=150),
        make_report("2020-03-12", total_cases=100, recovered=9, deceased=8, new_positives=15, swabs=150),
    ]


@pytest.fixture
def store(reports):
    return ReportStore(reports=reports)


@pytest.fixture
def engine(store):
    return StatisticsEngine(store)
