from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, Literal, Tuple

import numpy as np

from pricepath.errors import InvalidConfig, OutOfRange
from pricepath.models import PathConfig, PricePath, PricePoint, Timeframe, TimeframePreset
from pricepath.path_generator import PathGenerator

LOGGER = logging.getLogger(__name__)


TIMEFRAME_PRESETS: Dict[Timeframe, TimeframePreset] = {
    Timeframe.H24: TimeframePreset(periods=24, interval_hours=1),
    Timeframe.D7: TimeframePreset(periods=168, interval_hours=1),
    Timeframe.D30: TimeframePreset(periods=120, interval_hours=6),
    Timeframe.D90: TimeframePreset(periods=360, interval_hours=6),
}


@dataclass(frozen=True)
class PathSummary:
    latest: PricePoint
    previous: PricePoint | None
    yes_change: float
    yes_change_percent: float
    min_yes: float
    max_yes: float
    average_yes: float
    total_volume: float
    trend: Literal["up", "down"]
    trend_strength: float


def parse_timeframe(timeframe: Timeframe | str) -> Timeframe:
    if isinstance(timeframe, Timeframe):
        return timeframe
    try:
        return Timeframe(str(timeframe).strip().lower())
    except ValueError:
        valid = ", ".join(item.value for item in Timeframe)
        raise InvalidConfig(f"unknown timeframe {timeframe!r} (expected one of {valid})") from None


def preset_for(timeframe: Timeframe | str) -> TimeframePreset:
    return TIMEFRAME_PRESETS[parse_timeframe(timeframe)]


def config_for_timeframe(
    timeframe: Timeframe | str,
    *,
    seed: int,
    base_price: float,
    end_millis: int,
) -> PathConfig:
    """Build a config whose newest point lands on ``end_millis``."""
    preset = preset_for(timeframe)
    config = PathConfig(
        seed=seed,
        periods=preset.periods,
        interval_hours=preset.interval_hours,
        base_price=base_price,
    )
    return replace(config, start_millis=int(end_millis) - preset.periods * config.interval_millis)


def for_timeframe(
    path: PricePath,
    timeframe: Timeframe | str,
    generator: PathGenerator | None = None,
) -> PricePath:
    """Regenerate the trailing window of ``path`` at the timeframe's grain.

    The new path ends where ``path`` ends and reuses its seed and base
    price, so switching timeframes is reproducible without slicing.
    """
    source = path.config
    end_millis = path[-1].timestamp_millis if not path.is_empty else source.end_millis
    config = config_for_timeframe(
        timeframe,
        seed=source.seed,
        base_price=source.base_price,
        end_millis=end_millis,
    )
    LOGGER.debug(
        "regenerating timeframe=%s periods=%d interval_hours=%s end=%d",
        parse_timeframe(timeframe).value,
        config.periods,
        config.interval_hours,
        end_millis,
    )
    return (generator or PathGenerator()).generate(config)


def nearest_index(path: PricePath, fractional_position: float) -> int:
    if path.is_empty:
        raise OutOfRange("cannot sample an empty path")
    position = float(fractional_position)
    if not math.isfinite(position) or position < 0.0 or position > 1.0:
        raise OutOfRange(f"fractional position out of range [0, 1]: {fractional_position}")
    # Half rounds up, like a cursor sitting exactly between two samples.
    index = int(math.floor(position * (len(path) - 1) + 0.5))
    return min(len(path) - 1, index)


def nearest(path: PricePath, fractional_position: float) -> PricePoint:
    return path[nearest_index(path, fractional_position)]


def summarize_path(path: PricePath) -> PathSummary:
    if path.is_empty:
        raise OutOfRange("cannot summarize an empty path")

    yes = np.array(path.yes_prices, dtype=np.float64)
    volume = np.array([point.volume for point in path], dtype=np.float64)

    latest = path[-1]
    previous = path[-2] if len(path) > 1 else None
    change = latest.yes_price - previous.yes_price if previous is not None else 0.0
    change_percent = change / previous.yes_price if previous is not None else 0.0

    average = float(np.mean(yes))
    return PathSummary(
        latest=latest,
        previous=previous,
        yes_change=change,
        yes_change_percent=change_percent,
        min_yes=float(np.min(yes)),
        max_yes=float(np.max(yes)),
        average_yes=average,
        total_volume=float(np.sum(volume)),
        trend="up" if average > 0.5 else "down",
        trend_strength=abs(average - 0.5) * 2.0,
    )


def chart_bounds(path: PricePath, padding: float = 0.05) -> Tuple[float, float]:
    """Vertical axis range covering both series plus ``padding``."""
    if path.is_empty:
        raise OutOfRange("cannot bound an empty path")
    both = np.array(path.yes_prices + path.no_prices, dtype=np.float64)
    return float(np.min(both)) - padding, float(np.max(both)) + padding
