"""HSV -> RGB conversion.

Reference: https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB
"""

from typing import Optional

from . import _backend as B
from . import defaults
from ._backend import Array
from .hue import normalize_turn
from .types import RGB, RGBA


def _sector(sector: Array, choices: tuple[Array, ...], default: Array) -> Array:
    """Pick choices[sector], falling back to default for any other index."""
    out = default
    for index in reversed(range(len(choices))):
        out = B.where(sector == index, choices[index], out)
    return out


def hsv_to_rgb(h: Array, s: Array, v: Array, a: Optional[Array] = None) -> RGB | RGBA:
    """HSV in the range 0..1 -> RGB in the range 0..1.

    Hue is a fraction of a turn and may be any real number: it is wrapped
    into [0, 1], with NaN and -inf treated as 0 and +inf as 1. Alpha is
    returned unmodified as a fourth component if given, omitted otherwise.

    Args:
        h: Hue (0 = red, 1/3 = green, 2/3 = blue)
        s: Saturation (0-1)
        v: Value (0-1)
        a: Optional alpha, passed through

    Returns:
        RGB, or RGBA when alpha is supplied
    """
    h = normalize_turn(h)
    s = B.as_float(s)
    v = B.as_float(v)

    c = v * s
    h = h * defaults.HSV_SECTORS
    x = c * (1 - abs((h % 2) - 1))
    zero = x * 0

    # Sector 5 doubles as the fallback: h == 1 lands on index 6
    sector = B.floor(h)
    r = _sector(sector, (c, x, zero, zero, x), c)
    g = _sector(sector, (x, c, c, x, zero), zero)
    b = _sector(sector, (zero, zero, x, c, c), x)

    m = v - c
    rgb = (B.unwrap(r + m), B.unwrap(g + m), B.unwrap(b + m))

    if a is not None:
        return RGBA(*rgb, a)
    return RGB(*rgb)
