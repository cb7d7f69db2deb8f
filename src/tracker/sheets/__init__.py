"""Google Sheets data source: values API client and row parsing."""

from tracker.sheets.client import SheetsClient
from tracker.sheets.parsing import parse_row, parse_rows, parse_timestamp

__all__ = [
    "SheetsClient",
    "parse_row",
    "parse_rows",
    "parse_timestamp",
]
