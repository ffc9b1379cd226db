"""Rounding helpers shared by the proxy formulas."""

import math


def round_half_away(value: float, digits: int = 0) -> float:
    """
    Round to `digits` decimals, halves going away from zero.

    The value is scaled before rounding (``x * 10**digits``), so results
    match the usual ``round(x * 100) / 100`` idiom for positive inputs.
    """
    factor = 10 ** digits
    scaled = math.floor(abs(value) * factor + 0.5)
    return math.copysign(scaled / factor, value) if scaled else 0.0


def round_int(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(round_half_away(value, 0))


def round2(value: float) -> float:
    return round_half_away(value, 2)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
