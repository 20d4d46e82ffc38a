"""Scythe - weekly over/under reconciliation for Harvest timesheets.

This package pulls a person's time entries from Harvest week by week, compares
them with a 37.5 hour quota and appends the running balance to a Google Sheets
ledger.
"""

__version__ = "0.1.0"

from .harvest.client import HarvestClient
from .sheets.client import GoogleSheetsClient
from .timesheet.ledger import BalanceLedger
from .timesheet.reconciler import WeeklyReconciler


__all__ = [
    "BalanceLedger",
    "GoogleSheetsClient",
    "HarvestClient",
    "WeeklyReconciler",
]
