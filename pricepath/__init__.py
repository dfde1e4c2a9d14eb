"""Deterministic synthetic YES/NO price paths for prediction-market charts.

A seeded random walk with mean reversion, a periodic event term and a
weekend penalty, clamped to a probability band.  Paths are regenerated per
chart timeframe and sampled for cursor hover.

Usage::

    python3 -m pricepath --timeframe 7d --seed 42 --format csv
"""
