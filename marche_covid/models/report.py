"""Daily report model."""

from datetime import date, datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class DailyReport(BaseModel):
    """
    One region-day record of the civil protection dataset.

    Fields keep the dataset's own keys as aliases so documents load and save
    unchanged. Keys this model does not name are carried along as extras.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    reported_at: datetime = Field(alias="data")
    total_cases: int = Field(default=0, alias="totale_casi")
    recovered: int = Field(default=0, alias="dimessi_guariti")
    deceased: int = Field(default=0, alias="deceduti")
    new_positives: int = Field(default=0, alias="nuovi_positivi")
    swabs: int = Field(default=0, alias="tamponi")

    @property
    def day(self) -> date:
        """Calendar day of the report, time of day dropped."""
        return self.reported_at.date()

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the dataset's JSON shape."""
        return self.model_dump(mode="json", by_alias=True)

    def __repr__(self) -> str:
        return f"<DailyReport(day={self.day}, total_cases={self.total_cases})>"
