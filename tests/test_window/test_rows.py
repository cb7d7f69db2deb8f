"""Tests for row-window estimation and stale-row trimming.

All tests pass ``now`` explicitly so results do not depend on the clock.
"""

from datetime import datetime, timedelta, timezone

import pytest

from tracker.exceptions import SheetFormatError
from tracker.window.rows import (
    ROWS_PER_DAY,
    approximate_row_number,
    cutoff,
    from_row_number,
    midnight,
    rows_to_trim,
)

UTC = timezone.utc
REFERENCE = datetime(2024, 1, 1, tzinfo=UTC)


def _row(ts: datetime) -> list[str]:
    return [ts.strftime("%Y-%m-%dT%H:%M:%S.000Z"), "40000", "50"]


class TestApproximateRowNumber:
    """Tests for elapsed 5-minute interval counting."""

    def test_zero_at_reference(self) -> None:
        assert approximate_row_number(REFERENCE, now=REFERENCE) == 0

    def test_one_hour_is_twelve_rows(self) -> None:
        now = REFERENCE + timedelta(hours=1)
        assert approximate_row_number(REFERENCE, now=now) == 12

    def test_partial_interval_is_floored(self) -> None:
        """4m59s past a boundary still counts as the previous interval."""
        now = REFERENCE + timedelta(hours=1, minutes=4, seconds=59)
        assert approximate_row_number(REFERENCE, now=now) == 12

    def test_one_day_is_rows_per_day(self) -> None:
        now = REFERENCE + timedelta(days=1)
        assert approximate_row_number(REFERENCE, now=now) == ROWS_PER_DAY == 288

    def test_non_negative_for_past_reference(self) -> None:
        now = REFERENCE + timedelta(seconds=1)
        assert approximate_row_number(REFERENCE, now=now) >= 0

    def test_monotonic_as_now_advances(self) -> None:
        """Result never decreases as the current time moves forward."""
        previous = -1
        for seconds in range(0, 3 * 3600, 37):
            value = approximate_row_number(REFERENCE, now=REFERENCE + timedelta(seconds=seconds))
            assert value >= previous
            previous = value

    def test_defaults_to_current_time(self) -> None:
        """Without ``now`` the estimate is taken against the real clock."""
        reference = datetime.now(UTC) - timedelta(minutes=11)
        assert approximate_row_number(reference) == 2


class TestFromRowNumber:
    """Tests for the window start row."""

    def test_subtracts_full_days_and_today_rows(self) -> None:
        # 06:00 -> 72 rows written today
        now = datetime(2024, 1, 10, 6, 0, tzinfo=UTC)
        assert from_row_number(10_000, days_before=4, now=now) == 10_000 - (4 * 288 + 72)

    def test_at_midnight_only_full_days(self) -> None:
        now = datetime(2024, 1, 10, tzinfo=UTC)
        assert from_row_number(5_000, days_before=2, now=now) == 5_000 - 576

    def test_zero_days_keeps_today_only(self) -> None:
        now = datetime(2024, 1, 10, 1, 0, tzinfo=UTC)
        assert from_row_number(1_000, days_before=0, now=now) == 1_000 - 12

    def test_window_start_matches_cutoff_row(self) -> None:
        """With gap-free rows the start row is the row written at the cutoff."""
        now = datetime(2024, 1, 10, 13, 25, tzinfo=UTC)
        latest = approximate_row_number(REFERENCE, now=now)
        start = from_row_number(latest, days_before=4, now=now)
        assert start == approximate_row_number(REFERENCE, now=cutoff(4, now))


class TestCutoff:
    """Tests for midnight and cutoff arithmetic."""

    def test_midnight_keeps_timezone(self) -> None:
        tz = timezone(timedelta(hours=2))
        now = datetime(2024, 5, 3, 1, 30, tzinfo=tz)
        assert midnight(now) == datetime(2024, 5, 3, tzinfo=tz)

    def test_cutoff_crosses_month_boundary(self) -> None:
        now = datetime(2024, 3, 2, 10, 0, tzinfo=UTC)
        assert cutoff(4, now) == datetime(2024, 2, 27, tzinfo=UTC)

    def test_cutoff_crosses_year_boundary(self) -> None:
        now = datetime(2024, 1, 1, 23, 59, tzinfo=UTC)
        assert cutoff(1, now) == datetime(2023, 12, 31, tzinfo=UTC)


class TestRowsToTrim:
    """Tests for counting stale leading rows."""

    NOW = datetime(2024, 1, 10, 12, 0, tzinfo=UTC)
    CUTOFF = datetime(2024, 1, 6, tzinfo=UTC)  # 4 days before midnight

    def test_none_stale(self) -> None:
        rows = [_row(self.CUTOFF + timedelta(minutes=5 * i)) for i in range(5)]
        assert rows_to_trim(rows, days_before=4, now=self.NOW) == 0

    def test_all_stale(self) -> None:
        rows = [_row(self.CUTOFF - timedelta(minutes=5 * (i + 1))) for i in range(5)]
        assert rows_to_trim(rows, days_before=4, now=self.NOW) == 5

    def test_mixed_counts_stale_prefix(self) -> None:
        rows = [
            _row(self.CUTOFF - timedelta(minutes=10)),
            _row(self.CUTOFF - timedelta(minutes=5)),
            _row(self.CUTOFF),
            _row(self.CUTOFF + timedelta(minutes=5)),
        ]
        assert rows_to_trim(rows, days_before=4, now=self.NOW) == 2

    def test_row_exactly_at_cutoff_is_kept(self) -> None:
        assert rows_to_trim([_row(self.CUTOFF)], days_before=4, now=self.NOW) == 0

    def test_empty_candidates(self) -> None:
        assert rows_to_trim([], days_before=4, now=self.NOW) == 0

    def test_invalid_date_raises(self) -> None:
        with pytest.raises(SheetFormatError):
            rows_to_trim([["not a date", "1", "2"]], days_before=4, now=self.NOW)

    def test_blank_row_raises(self) -> None:
        rows = [_row(self.CUTOFF), [], _row(self.CUTOFF + timedelta(minutes=10))]
        with pytest.raises(SheetFormatError, match="Blank row"):
            rows_to_trim(rows, days_before=4, now=self.NOW)
