from __future__ import annotations


class PricePathError(ValueError):
    """Base class for validation failures raised by pricepath."""


class InvalidSeed(PricePathError):
    pass


class InvalidConfig(PricePathError):
    pass


class OutOfRange(PricePathError):
    pass
