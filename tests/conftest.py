"""Shared test fixtures for the BTC price tracker."""

from datetime import datetime, timedelta, timezone

import pytest

from tracker.config import AppSettings, DashboardSettings, SheetSettings, WindowSettings
from tracker.models import Sample

UTC = timezone.utc


def make_samples(count: int, start: datetime | None = None) -> list[Sample]:
    """Build ``count`` consecutive 5-minute samples with distinct values."""
    start = start or datetime(2024, 1, 1, tzinfo=UTC)
    return [
        Sample(
            timestamp=start + timedelta(minutes=5 * i),
            price=40000.0 + i,
            dominance=50.0 + i / 1000,
        )
        for i in range(count)
    ]


def make_rows(start: datetime, end: datetime) -> list[list[str]]:
    """Build sheet rows every 5 minutes from ``start`` to ``end`` inclusive."""
    rows = []
    ts = start
    i = 0
    while ts <= end:
        rows.append([
            ts.strftime("%Y-%m-%dT%H:%M:%S.000Z"),
            f"{40000 + i}.5",
            f"{50 + i / 1000:.3f}",
        ])
        ts += timedelta(minutes=5)
        i += 1
    return rows


@pytest.fixture
def mock_settings() -> AppSettings:
    """AppSettings with a fixed first entry, no row offset and a 1-day window."""
    return AppSettings(
        log_level="DEBUG",
        sheets=SheetSettings(
            sheet_id="test-sheet",
            tab_name="btc_price_log",
            api_key="test-api-key",  # type: ignore[arg-type]
            first_entry_timestamp="2024-01-01T00:00:00Z",
            row_offset=0,
        ),
        window=WindowSettings(days_before=1, trim_check_rows=5),
        dashboard=DashboardSettings(refresh_interval=300, default_duration="1d"),
    )
