"""Domain errors raised by the report store and the API validators."""

from datetime import date
from typing import Optional


class ReportError(Exception):
    """Base class for report errors."""


class ReportNotFound(ReportError):
    """No report (or no series point) matches the query."""

    def __init__(self, day: Optional[date] = None):
        self.day = day
        if day is None:
            super().__init__("No report available")
        else:
            super().__init__(f"No report available for {day.isoformat()}")


class DuplicateReport(ReportError):
    """A report for the same calendar day already exists."""

    def __init__(self, day: date):
        self.day = day
        super().__init__(f"A report for {day.isoformat()} already exists")


class InvalidDate(ReportError, ValueError):
    """A day value is not a valid YYYY-MM-DD date."""


class InvalidDateRange(ReportError, ValueError):
    """The start of a date range falls after its end."""


class PersistenceFailure(ReportError):
    """The data file could not be read or durably written."""
