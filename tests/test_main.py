"""Tests for component wiring and the application lifespan."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from tracker.config import AppSettings
from tracker.main import build_service, lifespan
from tracker.service import TrackerService


def test_build_service(mock_settings: AppSettings) -> None:
    service = build_service(mock_settings)
    assert isinstance(service, TrackerService)
    assert service.snapshot is None


@pytest.mark.asyncio
async def test_lifespan_refreshes_on_startup(mock_settings: AppSettings) -> None:
    """Startup runs one refresh before serving; shutdown stops the loop cleanly."""
    service = MagicMock()
    service.refresh = AsyncMock(return_value=None)
    service.snapshot = None
    app = SimpleNamespace(state=SimpleNamespace(service=service, settings=mock_settings))

    async with lifespan(app):  # type: ignore[arg-type]
        service.refresh.assert_awaited_once()

    # refresh_interval is 300s, so the loop never got to a second refresh
    assert service.refresh.await_count == 1
