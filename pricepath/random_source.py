"""Seeded pseudo-random stream for path generation.

Wraps numpy's PCG64 bit generator and builds doubles straight from its raw
64-bit output words.  Bit generator streams are frozen across numpy
releases, so a seed reproduces the same sequence on every platform and run,
independent of any ``Generator`` method changes.
"""

from __future__ import annotations

import numpy as np

from pricepath.errors import InvalidSeed

MAX_SEED = 2**64 - 1

# 53 mantissa bits -> uniform double in [0, 1).
_DOUBLE_SHIFT = 11
_DOUBLE_SCALE = 1.0 / (1 << 53)


class RandomSource:
    """Deterministic uniform stream owned by a single generator call.

    Parameters
    ----------
    seed:
        Integer in ``[0, 2**64 - 1]``.  Booleans and other types are
        rejected with :class:`InvalidSeed`.
    """

    def __init__(self, seed: int) -> None:
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
            raise InvalidSeed(f"seed must be an integer: {seed!r}")
        seed = int(seed)
        if seed < 0 or seed > MAX_SEED:
            raise InvalidSeed(f"seed out of range [0, {MAX_SEED}]: {seed}")
        self._seed = seed
        self._bit_generator = np.random.PCG64(seed)
        self._draws = 0

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def draws(self) -> int:
        return self._draws

    def next(self) -> float:
        """Return a float in ``[0, 1)``."""
        word = int(self._bit_generator.random_raw())
        self._draws += 1
        return (word >> _DOUBLE_SHIFT) * _DOUBLE_SCALE

    def next_signed(self) -> float:
        """Return a float in ``[-1, 1)``."""
        return 2.0 * self.next() - 1.0

    def uniform(self, low: float, high: float) -> float:
        if high < low:
            raise ValueError(f"uniform range inverted: [{low}, {high})")
        return low + (high - low) * self.next()
