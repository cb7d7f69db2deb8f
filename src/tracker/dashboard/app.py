"""FastAPI dashboard application factory with Jinja2 templates."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from tracker.dashboard.routes import actions, api, pages

TEMPLATES_DIR = Path(__file__).parent / "templates"

TIMESTAMP_FORMAT = "%d %b %Y %H:%M:%S"


def _format_timestamp(value: datetime | None) -> str:
    """Format a datetime as e.g. '08 Oct 2021 12:23:02'."""
    if value is None:
        return "N/A"
    return value.strftime(TIMESTAMP_FORMAT)


def _time_ago(value: datetime | None) -> str:
    """Convert a datetime to relative time string (e.g., '2m ago')."""
    if value is None:
        return "N/A"
    diff_seconds = (datetime.now(timezone.utc) - value).total_seconds()
    if diff_seconds < 60:
        return "just now"
    if diff_seconds < 3600:
        minutes = int(diff_seconds / 60)
        return f"{minutes}m ago"
    if diff_seconds < 86400:
        hours = int(diff_seconds / 3600)
        return f"{hours}h ago"
    days = int(diff_seconds / 86400)
    return f"{days}d ago"


def create_dashboard_app(lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        lifespan: Optional async context manager for application lifespan events.
                  Used by main.py to inject startup/shutdown logic.

    Returns:
        Configured FastAPI application with templates and routes.
        ``app.state.service`` and ``app.state.settings`` are wired by the caller.
    """
    app = FastAPI(
        title="BTC Price Tracker",
        lifespan=lifespan,
    )

    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["format_timestamp"] = _format_timestamp
    templates.env.filters["time_ago"] = _time_ago
    app.state.templates = templates

    app.include_router(pages.router)
    app.include_router(api.router, prefix="/api")
    app.include_router(actions.router, prefix="/actions")

    return app
