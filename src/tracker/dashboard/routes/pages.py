"""Page routes serving the main dashboard HTML template."""

from __future__ import annotations

import json

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tracker.dashboard.chart import chart_config
from tracker.models import Duration
from tracker.service import TrackerService

log = structlog.get_logger(__name__)

router = APIRouter()


def status_context(service: TrackerService) -> dict:
    """Template context for the status partial (last updated / last fetched)."""
    snapshot = service.snapshot
    return {
        "last_updated_at": snapshot.last_updated_at if snapshot else None,
        "last_fetched_at": snapshot.last_fetched_at if snapshot else None,
        "last_error": service.last_error,
    }


def resolve_duration(request: Request, duration: Duration | None) -> Duration:
    """Selected duration, falling back to the configured default."""
    if duration is not None:
        return duration
    return Duration(request.app.state.settings.dashboard.default_duration)


@router.get("/", response_class=HTMLResponse)
async def dashboard_index(request: Request, duration: Duration | None = None) -> HTMLResponse:
    """Main dashboard page: chart for the selected duration plus status lines."""
    templates: Jinja2Templates = request.app.state.templates
    service: TrackerService = request.app.state.service
    selected = resolve_duration(request, duration)

    snapshot = service.snapshot
    context = {
        "request": request,
        "durations": list(Duration),
        "selected": selected,
        "snapshot": snapshot,
        **status_context(service),
    }

    if snapshot is None:
        log.info("dashboard_no_snapshot", last_error=service.last_error)
        return templates.TemplateResponse("index.html", context, status_code=503)

    context["chart_json"] = json.dumps(chart_config(snapshot.series, selected))
    return templates.TemplateResponse("index.html", context)


@router.get("/partials/status", response_class=HTMLResponse)
async def status_partial(request: Request) -> HTMLResponse:
    """Status lines only; polled by the page to show background refreshes."""
    templates: Jinja2Templates = request.app.state.templates
    service: TrackerService = request.app.state.service
    return templates.TemplateResponse("partials/status.html", {
        "request": request,
        **status_context(service),
    })
