import argparse
import logging
import sys

from scythe.config import AppConfig, load_config
from scythe.errors import ScytheError
from scythe.harvest.client import HarvestClient
from scythe.logging_config.logging_config import setup_logging
from scythe.messaging.console_handler import ConsoleHandler
from scythe.sheets.client import GoogleSheetsClient
from scythe.timesheet.ledger import BalanceLedger
from scythe.timesheet.reconciler import WeeklyReconciler


logger = logging.getLogger(__name__)


def build_reconciler(config: AppConfig, console: ConsoleHandler | None = None) -> WeeklyReconciler:
    """Wire up the Harvest, Sheets and console collaborators"""
    sheets_client = GoogleSheetsClient(
        spreadsheet_id=config.spreadsheet_id,
        credentials_path=config.google_credentials,
    )
    sheet_name = config.sheet_name or sheets_client.first_sheet_name()

    ledger = BalanceLedger(
        sheets_client=sheets_client,
        sheet_name=sheet_name,
        employee=config.employee,
        category=config.category,
    )

    harvest_client = HarvestClient(
        subdomain=config.harvest_subdomain,
        user_id=config.harvest_username_id,
        username=config.harvest_username,
        password=config.harvest_password,
    )

    return WeeklyReconciler(
        harvest_client=harvest_client,
        ledger=ledger,
        console=console or ConsoleHandler(),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scythe",
        description="Reconcile weekly Harvest hours against the over/under ledger",
    )
    parser.add_argument(
        "--config-file",
        default=None,
        help="dotenv file holding the configuration (default: .env in the working directory)",
    )
    return parser.parse_args(argv)


# ruff: noqa: D103
def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging()
    logger.info("Starting scythe")

    try:
        config = load_config(args.config_file)
        reconciler = build_reconciler(config)
        weeks = reconciler.run()
    except ScytheError as e:
        logger.error(f"Aborting: {e}")
        logger.debug("Traceback", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("", file=sys.stderr)
        return 130

    logger.info(f"Finished, recorded {len(weeks)} weeks")
    return 0


if __name__ == "__main__":
    sys.exit(main())
