"""Phase data from the U.S. Naval Observatory Astronomical Applications API.

See https://aa.usno.navy.mil/data/api#phase
"""

import datetime
import logging
from typing import List

import requests
from requests.exceptions import RequestException

from moonphase.constants import PHASES_ENDPOINT
from moonphase.dates import format_date
from moonphase.errors import FetchError, PayloadError
from moonphase.phases import PhaseEvent
from moonphase.providers.base import DataProvider
from moonphase.validation import validate_phase_payload

logger = logging.getLogger(__name__)


class USNOProvider(DataProvider):
    """USNO moon phases provider."""

    @property
    def url(self) -> str:
        return f"{self.config.base_url}{PHASES_ENDPOINT}"

    def fetch_events(self, start: datetime.date, count: int) -> List[PhaseEvent]:
        """Fetch major phase events on or after a date.

        The API documentation asks for MM/DD/YYYY dates, but the service
        expects YYYY-MM-DD.

        Args:
            start: Date to start the search from
            count: Number of events to return

        Returns:
            Phase events in the order the API reports them

        Raises:
            FetchError: If the request fails or the response is not JSON
            PayloadError: If the response does not hold valid phase data
        """
        params = {"date": format_date(start), "nump": count}
        logger.debug("Requesting %s with %s", self.url, params)

        try:
            response = requests.get(
                self.url, params=params, timeout=self.config.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except RequestException as e:
            raise FetchError(f"Failed to fetch moon phase data: {str(e)}") from e
        except ValueError as e:
            raise FetchError(f"Moon phase API returned invalid JSON: {str(e)}") from e

        if isinstance(payload, dict) and "error" in payload:
            raise FetchError(f"Moon phase API error: {payload['error']}")

        is_valid, errors = validate_phase_payload(payload)
        if not is_valid:
            raise PayloadError(
                "Moon phase API returned unexpected data: " + "; ".join(errors)
            )

        try:
            events = [PhaseEvent.from_api(entry) for entry in payload["phasedata"]]
        except (TypeError, ValueError) as e:
            raise PayloadError(f"Moon phase API returned an invalid date: {e}") from e

        logger.debug("Received %d phase events", len(events))
        return events
