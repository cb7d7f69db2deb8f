"""Chart.js configuration for the price/dominance line chart.

Builds the ``{data, options}`` object the page hands to ``new Chart(...)``.
Price is plotted on the left axis, dominance on the right one.
"""

from typing import Any

from tracker.models import ChartSeries, Duration

TITLE = "Bitcoin price tracker"

PRICE_BORDER = "rgba(242,204,143,1)"
PRICE_FILL = "rgba(229,152,155,1)"
DOMINANCE_BORDER = "rgb(255, 99, 132)"
DOMINANCE_FILL = "rgba(255, 99, 132, 0.5)"
TICK_COLOR = "rgba(109,104,117,1)"


def _line_style(duration: Duration) -> dict[str, int]:
    # Dense 5-minute data gets thinner lines and smaller points
    if duration is Duration.FIVE_MINUTES:
        return {"borderWidth": 2, "pointRadius": 1}
    return {"borderWidth": 3, "pointRadius": 2}


def chart_options(duration: Duration) -> dict[str, Any]:
    """Chart options: time x-axis plus two linear y-axes."""
    return {
        "responsive": True,
        "plugins": {"title": {"display": True, "text": TITLE}},
        "scales": {
            "x": {
                "type": "time",
                "time": {"unit": "day" if duration is Duration.ONE_DAY else "hour"},
                "grid": {"display": False},
                "ticks": {"color": TICK_COLOR, "major": {"enabled": True}},
            },
            "y": {"type": "linear", "display": True, "position": "left"},
            "y1": {
                "type": "linear",
                "display": True,
                "position": "right",
                "grid": {"drawOnChartArea": False},
            },
        },
    }


def chart_data(series: ChartSeries, duration: Duration) -> dict[str, Any]:
    """Datasets for the selected tier."""
    price_points, dominance_points = series.for_duration(duration)
    style = _line_style(duration)
    return {
        "datasets": [
            {
                "label": "Bitcoin price",
                "fill": True,
                "data": [p.to_dict() for p in price_points],
                "borderColor": PRICE_BORDER,
                "backgroundColor": PRICE_FILL,
                "yAxisID": "y",
                **style,
            },
            {
                "label": "Dominance",
                "data": [p.to_dict() for p in dominance_points],
                "borderColor": DOMINANCE_BORDER,
                "backgroundColor": DOMINANCE_FILL,
                "yAxisID": "y1",
                **style,
            },
        ]
    }


def chart_config(series: ChartSeries, duration: Duration) -> dict[str, Any]:
    """Full Chart.js config for the selected tier."""
    return {
        "type": "line",
        "data": chart_data(series, duration),
        "options": chart_options(duration),
    }
