"""Derived statistics value objects."""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Union

Number = Union[int, float]


@dataclass(frozen=True)
class SeriesPoint:
    """One point of a derived daily series."""

    day: date
    value: Number

    def to_dict(self, key: str) -> Dict[str, Union[str, Number]]:
        return {"date": self.day.isoformat(), key: self.value}


@dataclass(frozen=True)
class CumulativeTotals:
    """Cumulative counts taken from the most recent report."""

    day: date
    total_cases: int
    recovered: int
    deceased: int
