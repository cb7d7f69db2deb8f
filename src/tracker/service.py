"""Refresh service: row window -> fetch -> trim -> parse -> downsample.

Composes the pure window and downsampling functions around the sheets
client and keeps the last good Snapshot in memory. A failed refresh is
logged and leaves the previous snapshot in place, so the dashboard keeps
serving it until the next successful cycle.
"""

import asyncio
import time
from datetime import datetime, timezone

from tracker.config import AppSettings
from tracker.exceptions import EmptySheetError, TrackerError
from tracker.logging import get_logger
from tracker.models import Snapshot
from tracker.series.downsample import build_chart_series
from tracker.sheets.client import SheetsClient
from tracker.sheets.parsing import parse_rows, parse_timestamp
from tracker.window.rows import (
    SECONDS_PER_SAMPLE,
    approximate_row_number,
    cutoff,
    from_row_number,
    rows_to_trim,
)

logger = get_logger(__name__)


class TrackerService:
    """Builds and caches chart snapshots from the price log sheet.

    Usage:
        service = TrackerService(settings, SheetsClient(settings.sheets))
        await service.refresh()
        snapshot = service.snapshot
    """

    def __init__(self, settings: AppSettings, client: SheetsClient) -> None:
        self._settings = settings
        self._client = client
        self._first_entry = parse_timestamp(settings.sheets.first_entry_timestamp)
        self._snapshot: Snapshot | None = None
        self._refreshed_at: float | None = None
        self.last_error: str | None = None

    @property
    def snapshot(self) -> Snapshot | None:
        """Last successfully built snapshot, or None before the first success."""
        return self._snapshot

    def window_start(self, now: datetime) -> int:
        """Estimated first row to request for the configured day window."""
        latest = approximate_row_number(self._first_entry, now) + self._settings.sheets.row_offset
        return from_row_number(latest, self._settings.window.days_before, now)

    def build_snapshot(self, now: datetime | None = None) -> Snapshot:
        """Fetch the row window and build a fresh Snapshot.

        Blocking (performs the HTTP fetch). Errors propagate to the caller.

        Raises:
            SheetFetchError: If the fetch fails.
            EmptySheetError: If no rows remain after trimming stale ones.
            SheetFormatError: If a date cell cannot be parsed.
        """
        now = now if now is not None else datetime.now(timezone.utc)
        days_before = self._settings.window.days_before

        from_row = self.window_start(now)
        values = self._client.fetch_rows(from_row)

        check_rows = values[: self._settings.window.trim_check_rows]
        trimmed = rows_to_trim(check_rows, days_before, now)
        samples = parse_rows(values[trimmed:])
        if not samples:
            raise EmptySheetError(f"All {len(values)} fetched rows predate the window")

        # A first row well after the cutoff means the estimate undercounted
        # (sampling gaps in the sheet); the window is short but still usable.
        window_cutoff = cutoff(days_before, now)
        gap = (samples[0].timestamp - window_cutoff).total_seconds()
        if trimmed == 0 and gap > SECONDS_PER_SAMPLE:
            logger.warning(
                "row_window_underestimated",
                from_row=from_row,
                first_row_at=samples[0].timestamp.isoformat(),
                cutoff=window_cutoff.isoformat(),
            )

        return Snapshot(
            series=build_chart_series(samples),
            samples_count=len(samples),
            last_updated_at=samples[-1].timestamp,
            last_fetched_at=now,
            from_row=from_row,
            trimmed_rows=trimmed,
        )

    async def refresh(self) -> Snapshot | None:
        """Rebuild the snapshot off the event loop.

        Returns:
            The new snapshot, or None if the refresh failed (the previous
            snapshot is kept).
        """
        start = time.monotonic()
        try:
            snapshot = await asyncio.to_thread(self.build_snapshot)
        except TrackerError as e:
            self.last_error = str(e)
            logger.warning(
                "snapshot_refresh_failed",
                error=str(e),
                error_type=type(e).__name__,
                serving_previous=self._snapshot is not None,
            )
            return None

        self._snapshot = snapshot
        self._refreshed_at = time.monotonic()
        self.last_error = None
        logger.info(
            "snapshot_refreshed",
            from_row=snapshot.from_row,
            trimmed_rows=snapshot.trimmed_rows,
            samples=snapshot.samples_count,
            duration_seconds=round(time.monotonic() - start, 2),
        )
        return snapshot

    def is_stale(self, max_age_seconds: float | None = None) -> bool:
        """True if no snapshot exists or it is older than ``max_age_seconds``.

        Defaults to the configured refresh interval.
        """
        if self._refreshed_at is None:
            return True
        max_age = (
            max_age_seconds
            if max_age_seconds is not None
            else self._settings.dashboard.refresh_interval
        )
        return time.monotonic() - self._refreshed_at > max_age
