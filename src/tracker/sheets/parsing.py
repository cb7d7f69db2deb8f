"""Row parsing for the ``[date, price, dominance]`` sheet layout.

Numeric cells are parsed leniently: anything that is not a float becomes
NaN and flows into the chart series unchanged. Date cells are parsed
strictly because the row window and the chart axis both depend on them.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from tracker.exceptions import SheetFormatError
from tracker.models import Sample

DATE_COLUMN = 0
PRICE_COLUMN = 1
DOMINANCE_COLUMN = 2


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 date cell into an aware datetime.

    Accepts a trailing ``Z``; naive values are taken as UTC.

    Raises:
        SheetFormatError: If the cell is not an ISO-8601 date.
    """
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise SheetFormatError(f"Invalid date cell: {text!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_number(text: str | None) -> float:
    """Parse a numeric cell, returning NaN for empty or malformed values."""
    if text is None:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_row(row: Sequence[str]) -> Sample:
    """Build a Sample from one sheet row.

    Missing trailing cells (the values API omits empty cells at the end of
    a row) are read as NaN.
    """
    if not row:
        raise SheetFormatError("Empty row")
    return Sample(
        timestamp=parse_timestamp(row[DATE_COLUMN]),
        price=parse_number(row[PRICE_COLUMN] if len(row) > PRICE_COLUMN else None),
        dominance=parse_number(
            row[DOMINANCE_COLUMN] if len(row) > DOMINANCE_COLUMN else None
        ),
    )


def parse_rows(rows: Iterable[Sequence[str]]) -> list[Sample]:
    """Parse rows in delivery order. No sorting or de-duplication."""
    return [parse_row(row) for row in rows]
