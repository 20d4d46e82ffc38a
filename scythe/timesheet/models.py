# scythe/timesheet/models.py
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List

from .hours import aggregate


@dataclass(frozen=True)
class TimeEntry:
    """A single Harvest day entry"""

    notes: str
    hours: Decimal
    project_id: int
    task_id: int
    billable: bool


@dataclass
class Week:
    """A Monday to Sunday reporting period"""

    start: date
    end: date
    label: str
    pto: Decimal = Decimal("0")
    billable_entries: List[TimeEntry] = field(default_factory=list)
    non_billable_entries: List[TimeEntry] = field(default_factory=list)

    @property
    def billable_hours(self) -> Decimal:
        return aggregate(self.billable_entries)

    @property
    def non_billable_hours(self) -> Decimal:
        return aggregate(self.non_billable_entries)


@dataclass(frozen=True)
class Balance:
    """Result of folding a week into the carried over/under"""

    previous_over_under: Decimal
    total: Decimal
    over_under: Decimal

