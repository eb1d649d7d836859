"""Daily report endpoints."""

from datetime import date
from typing import Any, Dict, Tuple

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from marche_covid.api.auth import get_current_user
from marche_covid.api.params import valid_day, valid_range
from marche_covid.core.date_range import filter_by_range
from marche_covid.core.errors import DuplicateReport, PersistenceFailure, ReportNotFound
from marche_covid.core.store import ReportStore
from marche_covid.database import get_store
from marche_covid.models.report import DailyReport

router = APIRouter()


@router.get("/")
def list_reports(store: ReportStore = Depends(get_store)):
    """List all daily reports."""
    return [r.to_record() for r in store.all()]


@router.get("/latest")
def get_latest_report(store: ReportStore = Depends(get_store)):
    """Get the most recent daily report."""
    try:
        return store.latest().to_record()
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="No report available")


@router.get("/{day}")
def get_report(day: date = Depends(valid_day), store: ReportStore = Depends(get_store)):
    """Get the daily report for one day."""
    try:
        return store.find_exact(day).to_record()
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="No report available for the given date")


@router.get("/{start}/{end}")
def list_reports_in_range(
    date_range: Tuple[date, date] = Depends(valid_range),
    store: ReportStore = Depends(get_store),
):
    """List daily reports in a date range."""
    reports = filter_by_range(store.snapshot(), *date_range)
    if not reports:
        raise HTTPException(status_code=404, detail="No report available for the given range")
    return [r.to_record() for r in reports]


@router.post("/", status_code=201)
def create_report(
    report: DailyReport,
    store: ReportStore = Depends(get_store),
    current_user: str = Depends(get_current_user),
):
    """Create a daily report."""
    try:
        return store.create(report).to_record()
    except DuplicateReport as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PersistenceFailure:
        raise HTTPException(status_code=500, detail="Error saving the new report")


@router.put("/{day}")
def update_report(
    day: date = Depends(valid_day),
    patch: Dict[str, Any] = Body(...),
    store: ReportStore = Depends(get_store),
    current_user: str = Depends(get_current_user),
):
    """Merge fields into an existing daily report."""
    try:
        return store.update(day, patch).to_record()
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="Report not found")
    except DuplicateReport as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))
    except PersistenceFailure:
        raise HTTPException(status_code=500, detail="Error updating the report")


@router.delete("/{day}")
def delete_report(
    day: date = Depends(valid_day),
    store: ReportStore = Depends(get_store),
    current_user: str = Depends(get_current_user),
):
    """Delete a daily report."""
    try:
        return store.delete(day).to_record()
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="Report not found")
    except PersistenceFailure:
        raise HTTPException(status_code=500, detail="Error saving changes")
