"""Shared data models for the price tracker.

Prices and dominance are float; malformed sheet cells are carried as NaN
and serialised as null, which Chart.js draws as a gap.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Duration(str, Enum):
    """Chart resolution tier selected in the dashboard."""

    FIVE_MINUTES = "5m"
    ONE_HOUR = "1h"
    ONE_DAY = "1d"

    @property
    def label(self) -> str:
        """Button label shown in the duration selector."""
        return "24h" if self is Duration.ONE_DAY else self.value


@dataclass(frozen=True)
class Sample:
    """One timestamped price/dominance observation from the sheet."""

    timestamp: datetime
    price: float
    dominance: float


@dataclass(frozen=True)
class SeriesPoint:
    """A single chart point."""

    x: datetime
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x.isoformat(), "y": self.y if math.isfinite(self.y) else None}


@dataclass
class ChartSeries:
    """Price and dominance series at the three resolution tiers."""

    price_5m: list[SeriesPoint] = field(default_factory=list)
    dominance_5m: list[SeriesPoint] = field(default_factory=list)
    price_1h: list[SeriesPoint] = field(default_factory=list)
    dominance_1h: list[SeriesPoint] = field(default_factory=list)
    price_1d: list[SeriesPoint] = field(default_factory=list)
    dominance_1d: list[SeriesPoint] = field(default_factory=list)

    def for_duration(
        self, duration: Duration
    ) -> tuple[list[SeriesPoint], list[SeriesPoint]]:
        """Return the (price, dominance) pair for the selected tier."""
        if duration is Duration.FIVE_MINUTES:
            return self.price_5m, self.dominance_5m
        if duration is Duration.ONE_HOUR:
            return self.price_1h, self.dominance_1h
        return self.price_1d, self.dominance_1d

    def counts(self) -> dict[str, int]:
        """Number of points per tier (price and dominance share lengths)."""
        return {
            Duration.FIVE_MINUTES.value: len(self.price_5m),
            Duration.ONE_HOUR.value: len(self.price_1h),
            Duration.ONE_DAY.value: len(self.price_1d),
        }


@dataclass
class Snapshot:
    """Result of one refresh: prepared series plus fetch bookkeeping."""

    series: ChartSeries
    samples_count: int
    last_updated_at: datetime  # timestamp of the newest sample
    last_fetched_at: datetime  # when the refresh ran
    from_row: int
    trimmed_rows: int = 0
