"""POST endpoints for manual dashboard actions."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tracker.dashboard.routes.pages import status_context
from tracker.service import TrackerService

log = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/refresh", response_class=HTMLResponse)
async def refresh_now(request: Request) -> HTMLResponse:
    """Force a sheet refresh and return the updated status partial."""
    templates: Jinja2Templates = request.app.state.templates
    service: TrackerService = request.app.state.service

    snapshot = await service.refresh()
    log.info("refresh_requested_via_dashboard", ok=snapshot is not None)

    return templates.TemplateResponse("partials/status.html", {
        "request": request,
        **status_context(service),
    })
