"""Hue and angle helpers shared by the HSV and Lch conversions."""

from math import inf, pi

from . import _backend as B
from . import defaults
from ._backend import Array


def to_radians(degrees: Array) -> Array:
    return degrees * (pi / 180)


def to_degrees(radians: Array) -> Array:
    return radians * (180 / pi)


def normalize_turn(h: Array) -> Array:
    """Bring an HSV hue (fraction of a turn) into [0, 1].

    NaN and -inf map to 0, +inf maps to 1 (one full turn, red again).
    Finite values outside [0, 1] wrap by floor modulo, so -1/3 becomes 2/3.
    Values already in [0, 1] are left alone; exactly 1 stays 1.
    """
    h = B.as_float(h)
    h = B.where(B.isnan(h), 0.0, h)
    h = B.where(h == -inf, 0.0, h)
    h = B.where(h == inf, 1.0, h)
    h = B.where((h < 0) | (h > 1), h % 1, h)
    return B.unwrap(h)


def positive_degrees(h: Array) -> Array:
    """Shift an atan2 result from (-180, 180] into [0, 360)."""
    return B.unwrap(B.where(h < 0, h + defaults.HUE_TURN_DEGREES, h))
