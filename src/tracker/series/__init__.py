"""Downsampling of 5-minute samples into 5m, 1h and 1d chart series."""

from tracker.series.downsample import (
    build_chart_series,
    daily,
    five_minutes,
    hourly,
    to_series,
)

__all__ = [
    "build_chart_series",
    "daily",
    "five_minutes",
    "hourly",
    "to_series",
]
