import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, TextIO

from scythe.timesheet.dates import DATE_FORMAT, display_date
from scythe.timesheet.models import Balance, Week

logger = logging.getLogger(__name__)


class ConsoleHandler:
    """Handles prompting for input and reporting weeks on the console"""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        """Initialize the console handler

        Args:
            input_func: Function used to read a line, takes the prompt
            output: Stream for reports, defaults to stdout

        """
        self.input_func = input_func
        self.output = output or sys.stdout

    def _read(self, prompt: str) -> str:
        try:
            return self.input_func(prompt).strip()
        except EOFError:
            return ""

    def _print(self, line: str = "") -> None:
        print(line, file=self.output)

    def prompt_start_date(self, default: date) -> str:
        """Ask for the start of the reporting period, empty keeps the default"""
        return self._read(f"Start Date ({default.strftime(DATE_FORMAT)}): ")

    def prompt_end_date(self, default: date) -> str:
        """Ask for the end of the reporting period, empty keeps the default"""
        return self._read(f"End Date ({default.strftime(DATE_FORMAT)}): ")

    def prompt_pto(self, week: Week) -> Decimal:
        """Ask for paid time off in hours until a non-negative number is given"""
        prompt = f"PTO/Holiday/Sick leave for week of {display_date(week.start)}: "
        while True:
            raw = self._read(prompt)
            if not raw:
                self._print()
                return Decimal("0")
            try:
                pto = Decimal(raw)
            except InvalidOperation:
                pto = None

            if pto is not None and pto.is_finite() and pto >= 0:
                self._print()
                return pto

            logger.debug(f"Rejected PTO input {raw!r}")
            self._print(f"Please enter a number of hours, e.g. 7.5 (got {raw!r})")

    def report_week(self, week: Week, balance: Balance) -> None:
        """Print the billable entries and totals for a recorded week"""
        self._print(f"Week of {display_date(week.start)}")
        self._print("------------")
        for entry in week.billable_entries:
            self._print(f"{entry.hours:.2f} | {entry.notes}")
        self._print("----")
        self._print(
            f"{week.billable_hours:.2f} | {balance.total:.2f} Total "
            f"({week.non_billable_hours:.2f} Non billable hours, {week.pto:.2f} PTO, "
            f"{balance.over_under:.2f} Over/Under)"
        )
        self._print()

    def report_no_weeks(self, start: date, end: date) -> None:
        self._print(f"No weeks to report between {start.strftime(DATE_FORMAT)} and {end.strftime(DATE_FORMAT)}")
