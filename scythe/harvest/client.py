import logging
from datetime import date
from typing import List

import requests
from pydantic import ValidationError

from scythe.errors import DecodeError, NetworkError
from scythe.timesheet.models import TimeEntry

from .models import HarvestReport

logger = logging.getLogger(__name__)

QUERY_DATE_FORMAT = "%Y%m%d"


class HarvestError(NetworkError):
    """Custom exception for Harvest request failures"""

    pass


class HarvestClient:
    """Fetches time entries for a single person from Harvest"""

    TIMEOUT = 30

    def __init__(
        self,
        subdomain: str,
        user_id: str,
        username: str,
        password: str,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = f"https://{subdomain}.harvestapp.com"
        self.user_id = user_id
        self.session = session or requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({"Accept": "application/json", "Content-Type": "application/json"})

    def fetch_entries(self, start: date, end: date, billable: bool) -> List[TimeEntry]:
        """Fetch billable or non-billable entries between start and end inclusive"""
        url = f"{self.base_url}/people/{self.user_id}/entries"
        params = {
            "from": start.strftime(QUERY_DATE_FORMAT),
            "to": end.strftime(QUERY_DATE_FORMAT),
            "billable": "yes" if billable else "no",
        }

        try:
            response = self.session.get(url, params=params, timeout=self.TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching Harvest entries: {e}")
            raise HarvestError(f"Failed to fetch entries for {start} to {end}: {str(e)}") from e

        try:
            report = HarvestReport.validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected Harvest response: {e}")
            raise DecodeError(f"Could not decode Harvest entries: {str(e)}") from e

        entries = [row.day_entry.to_time_entry(billable) for row in report]
        logger.info(
            f"Fetched {len(entries)} {'billable' if billable else 'non-billable'} entries for {start} to {end}"
        )
        return entries
