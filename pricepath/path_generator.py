"""Bounded YES-price random walk for market charts.

Each step adds four signals to the running YES price:

    event     = sin(progress * event_cycles * 2π) * event_amplitude
    noise     = U[-1, 1) * noise_amplitude
    reversion = (reversion_target - price) * reversion_strength
    weekend   = weekend_penalty on weekend timestamps, else 0

and clamps the result to ``[price_floor, price_ceiling]``.  The NO price is
always ``1 - yes``.  The constants are tuned for visual plausibility rather
than any market model, so every one of them lives in ``GeneratorSettings``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from pricepath.errors import InvalidConfig
from pricepath.models import PRICE_DECIMALS, PathConfig, PricePath, PricePoint, utc_weekday
from pricepath.random_source import RandomSource

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorSettings:
    """Shape constants for the synthetic walk."""

    # ── Periodic "market event" swing ──────────────────────────────
    event_amplitude: float = 0.05
    event_cycles: float = 2.0  # full sine cycles over the path (4π)

    # ── Step noise ─────────────────────────────────────────────────
    noise_amplitude: float = 0.03

    # ── Mean reversion ─────────────────────────────────────────────
    reversion_target: float = 0.5
    reversion_strength: float = 0.02

    # ── Weekend effect (datetime.weekday(): Mon=0 .. Sun=6, UTC) ───
    weekend_penalty: float = -0.01
    weekend_days: Tuple[int, ...] = (5, 6)

    # ── Price band ─────────────────────────────────────────────────
    price_floor: float = 0.05
    price_ceiling: float = 0.95

    # ── Volume draw ────────────────────────────────────────────────
    volume_min: float = 100_000.0
    volume_max: float = 1_100_000.0

    def validate(self) -> None:
        if not (0.0 < self.price_floor < self.price_ceiling < 1.0):
            raise InvalidConfig(
                f"price band must satisfy 0 < floor < ceiling < 1: "
                f"[{self.price_floor}, {self.price_ceiling}]"
            )
        if self.volume_min < 0 or self.volume_max < self.volume_min:
            raise InvalidConfig(
                f"volume range must satisfy 0 <= min <= max: "
                f"[{self.volume_min}, {self.volume_max}]"
            )
        for day in self.weekend_days:
            if not 0 <= day <= 6:
                raise InvalidConfig(f"weekend day must be in 0..6: {day}")


class PathGenerator:
    """Produces a ``PricePath`` from a ``PathConfig``.

    Holds settings only; every call builds its own ``RandomSource`` from the
    config seed, so one instance may be shared between callers.
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        self._settings = settings or GeneratorSettings()
        self._settings.validate()

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    def generate(self, config: PathConfig) -> PricePath:
        config.validate()
        settings = self._settings
        rng = RandomSource(config.seed)

        interval_millis = config.interval_millis
        current = self._clamp(float(config.base_price))
        points: list[PricePoint] = []

        start_millis = int(config.start_millis)
        for i in range(int(config.periods) + 1):
            timestamp = start_millis + i * interval_millis
            if i > 0:
                progress = i / config.periods
                current = self._clamp(
                    current
                    + self._event_term(progress)
                    + rng.next_signed() * settings.noise_amplitude
                    + (settings.reversion_target - current) * settings.reversion_strength
                    + self._weekend_term(timestamp)
                )
            points.append(
                PricePoint(
                    timestamp_millis=timestamp,
                    yes_price=self._clamp(round(current, PRICE_DECIMALS)),
                    volume=rng.uniform(settings.volume_min, settings.volume_max),
                )
            )

        LOGGER.debug(
            "generated path seed=%d periods=%d interval_hours=%s first_yes=%.4f last_yes=%.4f",
            config.seed,
            config.periods,
            config.interval_hours,
            points[0].yes_price,
            points[-1].yes_price,
        )
        return PricePath(config=config, points=tuple(points))

    def _event_term(self, progress: float) -> float:
        settings = self._settings
        return math.sin(progress * settings.event_cycles * 2.0 * math.pi) * settings.event_amplitude

    def _weekend_term(self, timestamp_millis: int) -> float:
        weekday = utc_weekday(timestamp_millis)
        if weekday in self._settings.weekend_days:
            return self._settings.weekend_penalty
        return 0.0

    def _clamp(self, value: float) -> float:
        return min(self._settings.price_ceiling, max(self._settings.price_floor, value))


def generate_path(config: PathConfig, settings: GeneratorSettings | None = None) -> PricePath:
    return PathGenerator(settings).generate(config)
