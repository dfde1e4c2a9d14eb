from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Tuple

from dotenv import load_dotenv

from pricepath.path_generator import GeneratorSettings


def _as_float(value: str | None, default: float) -> float:
    if value is None or not value.strip():
        return default
    return float(value)


def _as_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _as_csv(value: str | None) -> List[str]:
    if value is None or not value.strip():
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _as_weekdays(value: str | None, default: Tuple[int, ...]) -> Tuple[int, ...]:
    # "none" disables the weekend effect entirely.
    if value is not None and value.strip().lower() == "none":
        return ()
    parts = _as_csv(value)
    if not parts:
        return default
    return tuple(int(part) for part in parts)


@dataclass(frozen=True)
class PricePathSettings:
    """Runtime settings.  All env vars are prefixed with ``PRICEPATH_``."""

    log_level: str = "INFO"
    default_seed: int = 42
    default_base_price: float = 0.5
    default_timeframe: str = "7d"
    generator: GeneratorSettings = field(default_factory=GeneratorSettings)


def load_generator_settings() -> GeneratorSettings:
    defaults = GeneratorSettings()
    return GeneratorSettings(
        event_amplitude=_as_float(os.getenv("PRICEPATH_EVENT_AMPLITUDE"), defaults.event_amplitude),
        event_cycles=_as_float(os.getenv("PRICEPATH_EVENT_CYCLES"), defaults.event_cycles),
        noise_amplitude=_as_float(os.getenv("PRICEPATH_NOISE_AMPLITUDE"), defaults.noise_amplitude),
        reversion_target=_as_float(os.getenv("PRICEPATH_REVERSION_TARGET"), defaults.reversion_target),
        reversion_strength=_as_float(
            os.getenv("PRICEPATH_REVERSION_STRENGTH"), defaults.reversion_strength
        ),
        weekend_penalty=_as_float(os.getenv("PRICEPATH_WEEKEND_PENALTY"), defaults.weekend_penalty),
        weekend_days=_as_weekdays(os.getenv("PRICEPATH_WEEKEND_DAYS"), defaults.weekend_days),
        price_floor=_as_float(os.getenv("PRICEPATH_PRICE_FLOOR"), defaults.price_floor),
        price_ceiling=_as_float(os.getenv("PRICEPATH_PRICE_CEILING"), defaults.price_ceiling),
        volume_min=_as_float(os.getenv("PRICEPATH_VOLUME_MIN"), defaults.volume_min),
        volume_max=_as_float(os.getenv("PRICEPATH_VOLUME_MAX"), defaults.volume_max),
    )


def load_settings() -> PricePathSettings:
    load_dotenv(override=False)

    return PricePathSettings(
        log_level=os.getenv("PRICEPATH_LOG_LEVEL", "INFO"),
        default_seed=_as_int(os.getenv("PRICEPATH_SEED"), 42),
        default_base_price=_as_float(os.getenv("PRICEPATH_BASE_PRICE"), 0.5),
        default_timeframe=os.getenv("PRICEPATH_TIMEFRAME", "7d").strip() or "7d",
        generator=load_generator_settings(),
    )
