"""Shared fixtures for tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from scythe.sheets.models import LastRow
from scythe.timesheet.models import TimeEntry, Week


def make_entry(hours: str, notes: str = "", billable: bool = True) -> TimeEntry:
    return TimeEntry(notes=notes, hours=Decimal(hours), project_id=1, task_id=2, billable=billable)


@pytest.fixture
def sample_week() -> Week:
    """A week with billable, non-billable and PTO hours."""
    return Week(
        start=date(2024, 3, 4),
        end=date(2024, 3, 10),
        label="3/4/2024",
        pto=Decimal("2"),
        billable_entries=[make_entry("6", "Client work"), make_entry("4", "Code review")],
        non_billable_entries=[make_entry("5", "Training", billable=False)],
    )


@pytest.fixture
def empty_week() -> Week:
    """A week with no entries and no PTO."""
    return Week(start=date(2024, 3, 11), end=date(2024, 3, 17), label="3/11/2024")


@pytest.fixture
def sheets_client() -> MagicMock:
    """A stand-in for GoogleSheetsClient with three rows already written."""
    client = MagicMock()
    client.read_last_row.return_value = LastRow(
        index=2,
        cells=["2/26/2024", "Jane Doe", "Engineering", "8.00", "Old work", "", "", "20.50", "0.00", "0.00"],
    )
    return client
