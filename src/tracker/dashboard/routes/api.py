"""JSON API endpoints for chart series, chart config and snapshot status."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from tracker.dashboard.chart import chart_config
from tracker.dashboard.routes.pages import resolve_duration
from tracker.models import Duration, Snapshot
from tracker.service import TrackerService

router = APIRouter()


def _unavailable(service: TrackerService) -> JSONResponse:
    return JSONResponse(
        {"error": "No data available yet", "detail": service.last_error},
        status_code=503,
    )


def _current(request: Request) -> tuple[TrackerService, Snapshot | None]:
    service: TrackerService = request.app.state.service
    return service, service.snapshot


@router.get("/series")
async def get_series(request: Request, duration: Duration | None = None) -> JSONResponse:
    """Price and dominance points for one tier."""
    service, snapshot = _current(request)
    if snapshot is None:
        return _unavailable(service)

    selected = resolve_duration(request, duration)
    price_points, dominance_points = snapshot.series.for_duration(selected)
    return JSONResponse({
        "duration": selected.value,
        "price": [p.to_dict() for p in price_points],
        "dominance": [p.to_dict() for p in dominance_points],
    })


@router.get("/chart")
async def get_chart(request: Request, duration: Duration | None = None) -> JSONResponse:
    """Chart.js config for one tier, as embedded in the page."""
    service, snapshot = _current(request)
    if snapshot is None:
        return _unavailable(service)

    selected = resolve_duration(request, duration)
    return JSONResponse(chart_config(snapshot.series, selected))


@router.get("/snapshot")
async def get_snapshot(request: Request) -> JSONResponse:
    """Snapshot summary: point counts per tier, timestamps and row window."""
    service, snapshot = _current(request)
    if snapshot is None:
        return _unavailable(service)

    return JSONResponse({
        "samples": snapshot.samples_count,
        "points": snapshot.series.counts(),
        "last_updated_at": snapshot.last_updated_at.isoformat(),
        "last_fetched_at": snapshot.last_fetched_at.isoformat(),
        "from_row": snapshot.from_row,
        "trimmed_rows": snapshot.trimmed_rows,
        "stale": service.is_stale(),
        "last_error": service.last_error,
    })
