from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Iterator, Tuple

import numpy as np

from pricepath.errors import InvalidConfig

MILLIS_PER_HOUR = 60 * 60 * 1000
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# 1970-01-01 was a Thursday (weekday 3).
_EPOCH_WEEKDAY = 3

# Fixed decimal precision of YES/NO prices.
PRICE_DECIMALS = 4


def utc_weekday(timestamp_millis: int) -> int:
    """``datetime.weekday()`` numbering (Mon=0) in UTC, valid before the epoch."""
    return (int(timestamp_millis) // MILLIS_PER_DAY + _EPOCH_WEEKDAY) % 7


class Timeframe(str, Enum):
    H24 = "24h"
    D7 = "7d"
    D30 = "30d"
    D90 = "90d"


@dataclass(frozen=True)
class TimeframePreset:
    periods: int
    interval_hours: float

    @property
    def point_count(self) -> int:
        return self.periods + 1


@dataclass(frozen=True)
class PathConfig:
    """Seeded recipe for one price path.

    ``start_millis`` is the timestamp of the oldest point.  It is part of
    the config so identical configs always reproduce identical timestamps.
    """

    seed: int
    periods: int
    interval_hours: float
    base_price: float
    start_millis: int = 0

    @property
    def interval_millis(self) -> int:
        return int(round(self.interval_hours * MILLIS_PER_HOUR))

    @property
    def end_millis(self) -> int:
        return self.start_millis + self.periods * self.interval_millis

    def validate(self) -> None:
        if isinstance(self.periods, bool) or not isinstance(self.periods, (int, np.integer)):
            raise InvalidConfig(f"periods must be an integer: {self.periods!r}")
        if self.periods < 1:
            raise InvalidConfig(f"periods must be >= 1: {self.periods}")
        interval = float(self.interval_hours)
        if not math.isfinite(interval) or interval <= 0:
            raise InvalidConfig(f"interval_hours must be > 0: {self.interval_hours}")
        if self.interval_millis < 1:
            raise InvalidConfig(
                f"interval_hours too small to advance the clock: {self.interval_hours}"
            )
        base = float(self.base_price)
        if not (0.0 < base < 1.0):
            raise InvalidConfig(f"base_price out of range (0, 1): {self.base_price}")
        if isinstance(self.start_millis, bool) or not isinstance(
            self.start_millis, (int, np.integer)
        ):
            raise InvalidConfig(f"start_millis must be an integer: {self.start_millis!r}")


@dataclass(frozen=True)
class PricePoint:
    timestamp_millis: int
    yes_price: float
    volume: float

    @property
    def no_price(self) -> float:
        # Always derived from the YES side so the pair sums to 1.
        return round(1.0 - self.yes_price, PRICE_DECIMALS)

    @property
    def observed_at(self) -> datetime:
        return EPOCH + timedelta(milliseconds=int(self.timestamp_millis))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp_millis,
            "date": self.observed_at.isoformat(),
            "yesPrice": self.yes_price,
            "noPrice": self.no_price,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class PricePath:
    """Immutable, oldest-first sequence of price points."""

    config: PathConfig
    points: Tuple[PricePoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> PricePoint:
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def yes_prices(self) -> Tuple[float, ...]:
        return tuple(point.yes_price for point in self.points)

    @property
    def no_prices(self) -> Tuple[float, ...]:
        return tuple(point.no_price for point in self.points)

    @property
    def timestamps(self) -> Tuple[int, ...]:
        return tuple(point.timestamp_millis for point in self.points)

    def to_records(self) -> list[Dict[str, Any]]:
        return [point.to_dict() for point in self.points]
