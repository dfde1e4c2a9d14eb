"""Display strings for prices, volumes and market deadlines."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MILLIS_PER_SECOND = 1000
_MILLIS_PER_MINUTE = 60 * _MILLIS_PER_SECOND
_MILLIS_PER_HOUR = 60 * _MILLIS_PER_MINUTE
_MILLIS_PER_DAY = 24 * _MILLIS_PER_HOUR
_DAYS_PER_MONTH = 30


@dataclass(frozen=True)
class Countdown:
    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def ended(self) -> bool:
        return self.days == self.hours == self.minutes == self.seconds == 0


def _finite(value: float) -> float:
    numeric = float(value)
    if not math.isfinite(numeric):
        raise ValueError(f"expected a finite number: {value}")
    return numeric


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_currency(value: float, decimals: int = 2) -> str:
    numeric = _finite(value)
    sign = "-" if numeric < 0 and round(abs(numeric), decimals) != 0 else ""
    return f"{sign}${abs(numeric):,.{decimals}f}"


def format_percent(value: float, decimals: int = 2, signed: bool = False) -> str:
    """Render a fraction as a percentage (``0.1234`` -> ``"12.34%"``)."""
    percent = _finite(value) * 100.0
    text = f"{percent:.{decimals}f}%"
    if signed and round(percent, decimals) > 0:
        return "+" + text
    return text


def format_volume(volume: float) -> str:
    numeric = _finite(volume)
    if numeric < 0:
        raise ValueError(f"volume must be non-negative: {volume}")
    if numeric >= 1_000_000:
        return f"${numeric / 1_000_000:.1f}M"
    if numeric >= 1_000:
        return f"${numeric / 1_000:.1f}K"
    return f"${numeric:.0f}"


def format_time_remaining(now_millis: int, end_millis: int) -> str:
    """Coarsest-unit time left: months, days, hours, then minutes."""
    remaining = int(end_millis) - int(now_millis)
    if remaining <= 0:
        return "Ended"

    days = remaining // _MILLIS_PER_DAY
    if days > _DAYS_PER_MONTH:
        return _plural(days // _DAYS_PER_MONTH, "month")
    if days > 0:
        return _plural(days, "day")

    hours = (remaining % _MILLIS_PER_DAY) // _MILLIS_PER_HOUR
    if hours > 0:
        return _plural(hours, "hour")

    minutes = (remaining % _MILLIS_PER_HOUR) // _MILLIS_PER_MINUTE
    return _plural(minutes, "minute")


def countdown(now_millis: int, end_millis: int) -> Countdown:
    remaining = int(end_millis) - int(now_millis)
    if remaining <= 0:
        return Countdown(days=0, hours=0, minutes=0, seconds=0)
    return Countdown(
        days=remaining // _MILLIS_PER_DAY,
        hours=(remaining % _MILLIS_PER_DAY) // _MILLIS_PER_HOUR,
        minutes=(remaining % _MILLIS_PER_HOUR) // _MILLIS_PER_MINUTE,
        seconds=(remaining % _MILLIS_PER_MINUTE) // _MILLIS_PER_SECOND,
    )


def probability_label(price: float) -> str:
    numeric = _finite(price)
    if numeric >= 0.8:
        return "Very Likely"
    if numeric >= 0.6:
        return "Likely"
    if numeric >= 0.4:
        return "Uncertain"
    if numeric >= 0.2:
        return "Unlikely"
    return "Very Unlikely"


def confidence_level(confidence: float) -> str:
    numeric = _finite(confidence)
    if numeric >= 0.8:
        return "Very High"
    if numeric >= 0.6:
        return "High"
    if numeric >= 0.4:
        return "Moderate"
    if numeric >= 0.2:
        return "Low"
    return "Very Low"
