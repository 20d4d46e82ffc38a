# scythe/harvest/models.py
from decimal import Decimal

from pydantic import BaseModel, Field, TypeAdapter

from scythe.timesheet.models import TimeEntry


class DayEntry(BaseModel):
    """A day entry as returned by the Harvest people entries endpoint"""

    notes: str | None = None
    hours: Decimal = Field(ge=0)
    project_id: int
    task_id: int

    def to_time_entry(self, billable: bool) -> TimeEntry:
        return TimeEntry(
            notes=self.notes or "",
            hours=self.hours,
            project_id=self.project_id,
            task_id=self.task_id,
            billable=billable,
        )


class ReportRow(BaseModel):
    day_entry: DayEntry


HarvestReport = TypeAdapter(list[ReportRow])
