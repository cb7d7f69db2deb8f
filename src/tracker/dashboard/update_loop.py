"""Periodic refresh loop keeping the dashboard snapshot fresh.

Rebuilds the snapshot every ``refresh_interval`` seconds. A failed
refresh keeps the previous snapshot; the loop itself never exits on
error, only on cancellation.
"""

from __future__ import annotations

import asyncio

import structlog
from fastapi import FastAPI

from tracker.service import TrackerService

log = structlog.get_logger(__name__)


async def refresh_loop(app: FastAPI) -> None:
    """Refresh ``app.state.service`` until the application shuts down.

    Each iteration sleeps for the configured interval, then rebuilds the
    snapshot. The first refresh happens in the lifespan before the loop
    starts, so the page has data as soon as the server accepts requests.

    Args:
        app: The FastAPI application with ``service`` and ``settings`` on state.
    """
    service: TrackerService = app.state.service
    refresh_interval = app.state.settings.dashboard.refresh_interval

    log.info("refresh_loop_started", interval=refresh_interval)

    while True:
        try:
            await asyncio.sleep(refresh_interval)
            await service.refresh()
        except asyncio.CancelledError:
            log.info("refresh_loop_cancelled")
            break
        except Exception:
            log.warning("refresh_loop_error", exc_info=True)
            # Continue loop on error -- don't crash the refresh loop
            await asyncio.sleep(1)
