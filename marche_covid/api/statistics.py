"""Statistics endpoints."""

from datetime import date
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException

from marche_covid.api.params import valid_range
from marche_covid.core.errors import ReportNotFound
from marche_covid.core.statistics import StatisticsEngine
from marche_covid.database import get_engine
from marche_covid.models.statistics import CumulativeTotals, SeriesPoint

router = APIRouter()


def _series_response(points: List[SeriesPoint], key: str):
    if not points:
        raise HTTPException(status_code=404, detail="No report available for the given range")
    return [p.to_dict(key) for p in points]


def _latest_totals(engine: StatisticsEngine) -> CumulativeTotals:
    try:
        return engine.latest_cumulative_totals()
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="No report available")


@router.get("/totals")
def get_totals(engine: StatisticsEngine = Depends(get_engine)):
    """Cumulative cases, recovered and deceased from the latest report."""
    totals = _latest_totals(engine)
    return {
        "date": totals.day.isoformat(),
        "total_cases": totals.total_cases,
        "total_recovered": totals.recovered,
        "total_deceased": totals.deceased,
    }


@router.get("/total-cases")
def get_total_cases(engine: StatisticsEngine = Depends(get_engine)):
    """Total positive cases since the start of the pandemic."""
    return {"total_cases": _latest_totals(engine).total_cases}


@router.get("/total-recovered")
def get_total_recovered(engine: StatisticsEngine = Depends(get_engine)):
    """Total recovered since the start of the pandemic."""
    return {"total_recovered": _latest_totals(engine).recovered}


@router.get("/total-deceased")
def get_total_deceased(engine: StatisticsEngine = Depends(get_engine)):
    """Total deceased since the start of the pandemic."""
    return {"total_deceased": _latest_totals(engine).deceased}


@router.get("/lethality-rate")
def get_lethality_rate(engine: StatisticsEngine = Depends(get_engine)):
    """Overall lethality rate, as a percentage."""
    try:
        return {"lethality_rate": engine.lethality_rate()}
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="No report available")


@router.get("/new-positives/{start}/{end}")
def get_new_positives(
    date_range: Tuple[date, date] = Depends(valid_range),
    engine: StatisticsEngine = Depends(get_engine),
):
    """Daily new positives in a date range."""
    return _series_response(engine.new_positives_series(*date_range), "new_positives")


@router.get("/new-recovered/{start}/{end}")
def get_new_recovered(
    date_range: Tuple[date, date] = Depends(valid_range),
    engine: StatisticsEngine = Depends(get_engine),
):
    """Daily new recovered in a date range."""
    return _series_response(engine.new_recovered_series(*date_range), "new_recovered")


@router.get("/new-deceased/{start}/{end}")
def get_new_deceased(
    date_range: Tuple[date, date] = Depends(valid_range),
    engine: StatisticsEngine = Depends(get_engine),
):
    """Daily new deceased in a date range."""
    return _series_response(engine.new_deceased_series(*date_range), "new_deceased")


@router.get("/moving-average/{start}/{end}")
def get_moving_average(
    date_range: Tuple[date, date] = Depends(valid_range),
    engine: StatisticsEngine = Depends(get_engine),
):
    """7-day moving average of new positives in a date range."""
    return _series_response(engine.moving_average_7(*date_range), "average_new_positives")


@router.get("/positivity-rate/{start}/{end}")
def get_positivity_rate(
    date_range: Tuple[date, date] = Depends(valid_range),
    engine: StatisticsEngine = Depends(get_engine),
):
    """Daily positivity rate in a date range, as a percentage."""
    return _series_response(engine.positivity_rate(*date_range), "positivity_rate")
