import logging
from datetime import date
from typing import List, Optional

from scythe.harvest.client import HarvestClient
from scythe.messaging.console_handler import ConsoleHandler

from .dates import find_end_date, find_start_date, resolve_end, resolve_start
from .ledger import BalanceLedger, compute_balance
from .models import Week
from .weeks import partition

logger = logging.getLogger(__name__)


class WeeklyReconciler:
    """Main class for reconciling Harvest hours against the ledger"""

    def __init__(
        self,
        harvest_client: HarvestClient,
        ledger: BalanceLedger,
        console: ConsoleHandler,
    ):
        self.harvest_client = harvest_client
        self.ledger = ledger
        self.console = console

    def resolve_weeks(self, today: Optional[date] = None) -> List[Week]:
        """Prompt for the reporting period and split it into weeks"""
        today = today or date.today()

        raw_start = self.console.prompt_start_date(find_start_date(today))
        start = resolve_start(raw_start, today)

        raw_end = self.console.prompt_end_date(find_end_date(today))
        end = resolve_end(raw_end, today)

        weeks = partition(start, end)
        logger.info(f"Reporting {len(weeks)} weeks between {start} and {end}")
        if not weeks:
            self.console.report_no_weeks(start, end)
        return weeks

    def process_week(self, week: Week) -> None:
        """Fetch, total and record a single week"""
        last_row, previous = self.ledger.previous_balance()

        week.pto = self.console.prompt_pto(week)
        week.billable_entries = self.harvest_client.fetch_entries(week.start, week.end, billable=True)
        week.non_billable_entries = self.harvest_client.fetch_entries(week.start, week.end, billable=False)

        balance = compute_balance(previous, week)
        self.ledger.record_week(last_row, week, balance)
        self.console.report_week(week, balance)

    def run(self, today: Optional[date] = None) -> List[Week]:
        """Reconcile every week in the prompted period, in order"""
        weeks = self.resolve_weeks(today)
        for week in weeks:
            logger.info(f"Processing week of {week.label}")
            self.process_week(week)
        return weeks
