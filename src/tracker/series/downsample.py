"""Downsampling of 5-minute samples into chart series.

The sheet already samples every 5 minutes, so the 5-minute tier is the
input unchanged. Coarser tiers pick every Nth sample rather than
averaging: the 1-hour tier keeps 1-based positions divisible by 12, the
1-day tier keeps the first sample plus positions divisible by 288.
"""

from collections.abc import Callable, Sequence

from tracker.models import ChartSeries, Sample, SeriesPoint

SAMPLES_PER_HOUR = 12
SAMPLES_PER_DAY = 288

MetricSelector = Callable[[Sample], float]


def price(sample: Sample) -> float:
    return sample.price


def dominance(sample: Sample) -> float:
    return sample.dominance


def to_series(samples: Sequence[Sample], selector: MetricSelector) -> list[SeriesPoint]:
    """Map samples to chart points for one metric. Same length, same order."""
    return [SeriesPoint(x=s.timestamp, y=selector(s)) for s in samples]


def _every_nth(samples: Sequence[Sample], step: int) -> list[Sample]:
    return [s for i, s in enumerate(samples) if (i + 1) % step == 0]


def five_minutes(samples: Sequence[Sample]) -> list[Sample]:
    return list(samples)


def hourly(samples: Sequence[Sample]) -> list[Sample]:
    """Every 12th sample: ``samples[11], samples[23], ...``."""
    return _every_nth(samples, SAMPLES_PER_HOUR)


def daily(samples: Sequence[Sample]) -> list[Sample]:
    """First sample plus every 288th sample.

    The first sample is always kept, so a window shorter than one day
    still yields a single daily point.
    """
    if not samples:
        return []
    return [samples[0], *_every_nth(samples, SAMPLES_PER_DAY)]


def build_chart_series(samples: Sequence[Sample]) -> ChartSeries:
    """Build the six price/dominance series for all three tiers."""
    tiers = {
        "5m": five_minutes(samples),
        "1h": hourly(samples),
        "1d": daily(samples),
    }
    return ChartSeries(
        price_5m=to_series(tiers["5m"], price),
        dominance_5m=to_series(tiers["5m"], dominance),
        price_1h=to_series(tiers["1h"], price),
        dominance_1h=to_series(tiers["1h"], dominance),
        price_1d=to_series(tiers["1d"], price),
        dominance_1d=to_series(tiers["1d"], dominance),
    )
