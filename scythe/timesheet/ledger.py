import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from scythe.errors import BalanceParseError
from scythe.sheets.client import GoogleSheetsClient
from scythe.sheets.models import LastRow

from .models import Balance, Week

logger = logging.getLogger(__name__)

QUOTA = Decimal("37.5")

# Column layout of a ledger row
LABEL_COLUMN = 0
EMPLOYEE_COLUMN = 1
CATEGORY_COLUMN = 2
HOURS_COLUMN = 3
NOTES_COLUMN = 4
OVER_UNDER_COLUMN = 7
PTO_COLUMN = 8
NON_BILLABLE_COLUMN = 9
ROW_WIDTH = 10


def format_hours(value: Decimal) -> str:
    """Fixed two decimal string used for every number written to the ledger"""
    return f"{value:.2f}"


def _parse_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as e:
        raise BalanceParseError(f"Cannot parse over/under {text!r}") from e
    if not value.is_finite():
        raise BalanceParseError(f"Cannot parse over/under {text!r}")
    return value


def parse_balance(text: Optional[str]) -> Decimal:
    """Parse the carried over/under cell, falling back to zero"""
    try:
        return _parse_decimal(text)
    except BalanceParseError as e:
        logger.warning(f"{e}, carrying forward 0")
        return Decimal("0")


def compute_balance(previous: Decimal, week: Week) -> Balance:
    """Fold a week's hours into the previous over/under"""
    total = week.billable_hours + week.non_billable_hours + week.pto
    return Balance(
        previous_over_under=previous,
        total=total,
        over_under=(total + previous) - QUOTA,
    )


class BalanceLedger:
    """Reads the carried balance from, and records weeks to, the ledger sheet"""

    def __init__(
        self,
        sheets_client: GoogleSheetsClient,
        sheet_name: str,
        employee: str,
        category: str,
    ):
        self.sheets_client = sheets_client
        self.sheet_name = sheet_name
        self.employee = employee
        self.category = category

    def previous_balance(self) -> Tuple[LastRow, Decimal]:
        """Read the last ledger row fresh and return it with its over/under"""
        last_row = self.sheets_client.read_last_row(self.sheet_name)
        cell = last_row.cells[OVER_UNDER_COLUMN] if len(last_row.cells) > OVER_UNDER_COLUMN else ""
        previous = parse_balance(cell)
        logger.info(f"Previous over/under from row {last_row.index + 1}: {previous}")
        return last_row, previous

    def build_rows(self, week: Week, balance: Balance) -> List[List[Optional[str]]]:
        """Build the rows for a week, summary cells go on the week's last row"""
        rows = []
        for entry in week.billable_entries:
            rows.append(self._entry_row(week, format_hours(entry.hours), entry.notes))

        if not rows:
            rows.append(self._entry_row(week, format_hours(Decimal("0")), ""))

        summary = rows[-1]
        summary[OVER_UNDER_COLUMN] = format_hours(balance.over_under)
        summary[PTO_COLUMN] = format_hours(week.pto)
        summary[NON_BILLABLE_COLUMN] = format_hours(week.non_billable_hours)
        return rows

    def _entry_row(self, week: Week, hours: str, notes: str) -> List[Optional[str]]:
        row: List[Optional[str]] = [None] * ROW_WIDTH
        row[LABEL_COLUMN] = week.label
        row[EMPLOYEE_COLUMN] = self.employee
        row[CATEGORY_COLUMN] = self.category
        row[HOURS_COLUMN] = hours
        row[NOTES_COLUMN] = notes
        return row

    def record_week(self, last_row: LastRow, week: Week, balance: Balance) -> None:
        """Write a week's rows below the last row and commit them"""
        rows = self.build_rows(week, balance)
        for offset, values in enumerate(rows, start=1):
            self.sheets_client.update_row(last_row.index + offset, values)
        self.sheets_client.synchronize(self.sheet_name)
        logger.info(f"Recorded week of {week.label}: {len(rows)} rows, over/under {balance.over_under}")
