"""Google Sheets values API client for the price log tab.

Reads a row range ``A{from_row}:C`` of the configured tab with a single
REST GET. Uses urllib.request (stdlib) rather than the Google client
libraries: one read-only endpoint with an API key is all that is needed.

No retry: a failed fetch fails the refresh and the previous snapshot keeps
being served until the next cycle.
"""

import http.client
import json
import urllib.error
import urllib.parse
import urllib.request

from tracker.config import SheetSettings
from tracker.exceptions import EmptySheetError, SheetFetchError
from tracker.logging import get_logger

logger = get_logger(__name__)

FIRST_COLUMN = "A"
LAST_COLUMN = "C"


class SheetsClient:
    """Fetches raw string rows from the price log sheet.

    Args:
        settings: Sheet id, tab name, API key and request timeout.

    Usage:
        client = SheetsClient(settings.sheets)
        rows = client.fetch_rows(from_row=612_000)
    """

    def __init__(self, settings: SheetSettings) -> None:
        self._settings = settings

    def build_url(self, from_row: int) -> str:
        """Compose the values URL for rows ``from_row`` onwards (1-based, clamped)."""
        start = max(from_row, 1)
        cell_range = f"{self._settings.tab_name}!{FIRST_COLUMN}{start}:{LAST_COLUMN}"
        url = (
            f"{self._settings.base_url.rstrip('/')}/spreadsheets/"
            f"{urllib.parse.quote(self._settings.sheet_id, safe='')}/values/"
            f"{urllib.parse.quote(cell_range, safe='')}"
        )
        api_key = self._settings.api_key.get_secret_value()
        if api_key:
            url += "?" + urllib.parse.urlencode({"key": api_key})
        return url

    def fetch_rows(self, from_row: int) -> list[list[str]]:
        """Fetch rows ``from_row`` onwards as lists of string cells.

        Raises:
            SheetFetchError: On HTTP, network or JSON decoding failure.
            EmptySheetError: If the response carries no ``values``.
        """
        url = self.build_url(from_row)
        headers = {"Accept": "application/json", "User-Agent": "BtcPriceTracker/1.0"}
        req = urllib.request.Request(url, headers=headers)

        try:
            with urllib.request.urlopen(req, timeout=self._settings.timeout_seconds) as resp:
                data = json.loads(resp.read())
        except urllib.error.HTTPError as e:
            logger.warning("sheet_fetch_http_error", status=e.code, from_row=from_row)
            raise SheetFetchError(f"Sheets API returned HTTP {e.code}") from e
        except (OSError, http.client.HTTPException) as e:
            # URLError, timeouts and resets while reading the body
            logger.warning("sheet_fetch_network_error", error=str(e), from_row=from_row)
            raise SheetFetchError(f"Sheets API unreachable: {e}") from e
        except json.JSONDecodeError as e:
            raise SheetFetchError("Sheets API returned invalid JSON") from e

        values = data.get("values") if isinstance(data, dict) else None
        if not values:
            raise EmptySheetError(
                f"No rows returned for {self._settings.tab_name} from row {from_row}"
            )

        logger.debug(
            "sheet_rows_fetched",
            range=data.get("range"),
            rows=len(values),
        )
        return values
