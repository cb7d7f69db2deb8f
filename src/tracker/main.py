"""Entry point for the BTC price tracker dashboard.

Wires settings, logging, the sheets client and the refresh service into
the FastAPI dashboard and serves it with uvicorn. The refresh loop runs
as a background task inside the application's lifespan, sharing the
event loop with the web server.
"""

import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tracker.config import AppSettings
from tracker.logging import get_logger, setup_logging
from tracker.service import TrackerService
from tracker.sheets.client import SheetsClient


def build_service(settings: AppSettings) -> TrackerService:
    """Create the refresh service and its sheets client from settings."""
    logger = get_logger("tracker.main")

    if not settings.sheets.api_key.get_secret_value():
        logger.warning(
            "no_sheets_api_key_configured",
            note="Requests only succeed if the sheet is readable without a key.",
        )

    client = SheetsClient(settings.sheets)
    return TrackerService(settings, client)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run an initial refresh, then keep refreshing in the background.

    On shutdown the refresh loop is cancelled and awaited.
    """
    from tracker.dashboard.update_loop import refresh_loop

    logger = get_logger("tracker.main")
    service: TrackerService = app.state.service

    await service.refresh()

    refresh_task = asyncio.create_task(refresh_loop(app))

    logger.info(
        "lifespan_started",
        refresh_interval=app.state.settings.dashboard.refresh_interval,
        has_snapshot=service.snapshot is not None,
    )

    yield

    refresh_task.cancel()
    try:
        await refresh_task
    except asyncio.CancelledError:
        pass

    logger.info("btc_price_tracker_stopped")


async def run() -> None:
    """Run the dashboard server until interrupted."""
    settings = AppSettings()

    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("tracker.main")

    from tracker.dashboard.app import create_dashboard_app

    app = create_dashboard_app(lifespan=lifespan)
    app.state.settings = settings
    app.state.service = build_service(settings)

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        sheet=settings.sheets.tab_name,
        days_before=settings.window.days_before,
    )

    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
