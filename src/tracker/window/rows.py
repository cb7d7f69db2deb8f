"""Row-window estimation for the append-only price log sheet.

The sheet gains one row every 5 minutes and is never pruned, so fetching
all of it gets slower every day. These functions estimate the row range
covering the last ``days_before`` days plus today, and count how many
leading rows of a fetched window are older than wanted.

All functions are pure: ``now`` is injectable and defaults to the current
UTC time. Estimates assume gap-free sampling; missing rows, clock drift and
DST shifts are not corrected. Over-estimation is handled by rows_to_trim;
under-estimation (sampling gaps) leaves the window short and is only
reported by the caller.
"""

import math
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from tracker.exceptions import SheetFormatError
from tracker.sheets.parsing import parse_timestamp

MINUTES_PER_SAMPLE = 5
SECONDS_PER_SAMPLE = MINUTES_PER_SAMPLE * 60
ROWS_PER_DAY = 24 * 60 // MINUTES_PER_SAMPLE  # 288


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def midnight(now: datetime | None = None) -> datetime:
    """Start of ``now``'s calendar day, in ``now``'s timezone."""
    return _now(now).replace(hour=0, minute=0, second=0, microsecond=0)


def cutoff(days_before: int = 4, now: datetime | None = None) -> datetime:
    """Oldest instant kept in the window: midnight minus ``days_before`` days."""
    return midnight(now) - timedelta(days=days_before)


def approximate_row_number(reference: datetime, now: datetime | None = None) -> int:
    """Whole 5-minute intervals elapsed from ``reference`` to ``now``.

    Partial intervals are floored, so the result is non-negative for any
    reference in the past and never decreases as ``now`` advances.

    Args:
        reference: Timestamp of a known row (e.g. the first sheet entry).
        now: Current time; defaults to UTC now.

    Returns:
        Estimated number of rows written since ``reference``.
    """
    elapsed = (_now(now) - reference).total_seconds()
    return math.floor(elapsed / SECONDS_PER_SAMPLE)


def from_row_number(
    latest_row_number: int, days_before: int = 4, now: datetime | None = None
) -> int:
    """Starting row for a window of ``days_before`` full days plus today.

    Subtracts ``ROWS_PER_DAY * days_before`` and the rows written since
    midnight from the estimated latest row.
    """
    current = _now(now)
    today_rows = approximate_row_number(midnight(current), current)
    return latest_row_number - (ROWS_PER_DAY * days_before + today_rows)


def rows_to_trim(
    candidate_rows: Sequence[Sequence[str]],
    days_before: int = 4,
    now: datetime | None = None,
) -> int:
    """Count candidate rows dated strictly before the window cutoff.

    Only the leading rows of a fetched window need checking: the estimate
    from from_row_number overshoots by at most a few rows.

    Args:
        candidate_rows: Leading rows of the fetched window, date cell first.
        days_before: Full days kept before today.
        now: Current time; defaults to UTC now.

    Returns:
        Number of stale rows (0 if none, len(candidate_rows) if all).

    Raises:
        SheetFormatError: If a row is blank or its date cell is unparseable.
    """
    limit = cutoff(days_before, now)
    stale = 0
    for index, row in enumerate(candidate_rows):
        if not row:
            raise SheetFormatError(f"Blank row at window offset {index}")
        if parse_timestamp(row[0]) < limit:
            stale += 1
    return stale
