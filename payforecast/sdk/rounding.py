"""Rounding helpers shared by the projection engine."""

import math


def round_half_up(amount: float) -> int:
    """Round to the nearest whole unit, halves rounding toward +infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); projected
    figures always round .5 up instead.

    Example: 2.5 -> 3, -2.5 -> -2, 0.49999999999999994 -> 0
    """
    # amount + 0.5 can round up in floating point; compare the fraction instead
    whole = math.floor(amount)
    return int(whole) + (1 if amount - whole >= 0.5 else 0)


def round_to_band(amount: float, band: int = 1000) -> int:
    """Round to the nearest multiple of band (half-up).

    Example: round_to_band(312500) -> 313000
    """
    return round_half_up(amount / band) * band
