import logging
from typing import Dict, List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build

from scythe.errors import NetworkError

from .models import LastRow

logger = logging.getLogger(__name__)

LAST_COLUMN = "J"


class SheetError(NetworkError):
    """Custom exception for sheet-related errors"""

    pass


class GoogleSheetsClient:
    """Handles all Google Sheets operations for the ledger"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_path: str,
        service=None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_path = credentials_path
        self.service = service or self._build_sheets_service()
        self._pending: Dict[int, List[Optional[str]]] = {}

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            creds = service_account.Credentials.from_service_account_file(
                self.credentials_path, scopes=self.SCOPES
            )
            return build("sheets", "v4", credentials=creds)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}") from e

    def first_sheet_name(self) -> str:
        """Title of the first sheet in the spreadsheet"""
        try:
            result = (
                self.service.spreadsheets()
                .get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties.title")
                .execute()
            )
            return result["sheets"][0]["properties"]["title"]
        except Exception as e:
            logger.error(f"Error reading spreadsheet metadata: {e}")
            raise SheetError(f"Failed to read sheet names: {str(e)}") from e

    def read_last_row(self, sheet_name: str) -> LastRow:
        """Get the last populated row of the sheet"""
        range_name = f"{sheet_name}!A:{LAST_COLUMN}"
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error reading last row: {e}")
            raise SheetError(f"Failed to read {range_name}: {str(e)}") from e

        rows = result.get("values", [])
        if not rows:
            return LastRow(index=-1, cells=[])
        return LastRow(index=len(rows) - 1, cells=[str(cell) for cell in rows[-1]])

    def update_row(self, row_index: int, values: List[Optional[str]]) -> None:
        """Buffer values for a 0-based row, None cells are left untouched"""
        if row_index < 0:
            raise ValueError("Row index cannot be negative")
        self._pending[row_index] = list(values)

    def synchronize(self, sheet_name: str) -> None:
        """Commit every buffered row in a single batch update"""
        if not self._pending:
            return

        data = [
            {
                "range": f"{sheet_name}!A{row_index + 1}",
                "values": [values],
            }
            for row_index, values in sorted(self._pending.items())
        ]
        try:
            self.service.spreadsheets().values().batchUpdate(
                spreadsheetId=self.spreadsheet_id,
                body={"valueInputOption": "RAW", "data": data},
            ).execute()
        except Exception as e:
            logger.error(f"Error saving spreadsheet data: {e}")
            raise SheetError(f"Cannot save spreadsheet data: {str(e)}") from e

        logger.info(f"Synchronized {len(data)} rows to {sheet_name}")
        self._pending.clear()
