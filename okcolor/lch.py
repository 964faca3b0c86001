"""Cartesian <-> cylindrical conversion for Lab-shaped color spaces.

Works for any lightness/opponent-axis space; Oklab <-> Oklch is the
instance this package uses.
"""

from . import _backend as B
from ._backend import Array
from .hue import positive_degrees, to_degrees, to_radians
from .types import Lab, Lch, Oklab, Oklch


def lab_to_lch(l: Array, a: Array, b: Array) -> Lch:
    """Lab -> Lch. Returns hue in degrees [0, 360)."""
    c = B.sqrt(a**2 + b**2)
    h = positive_degrees(to_degrees(B.atan2(b, a)))
    return Lch(l, c, h)


def lch_to_lab(l: Array, c: Array, h: Array) -> Lab:
    """Lch -> Lab. Hue in degrees, any real value."""
    h_rad = to_radians(h)
    return Lab(l, c * B.cos(h_rad), c * B.sin(h_rad))


def oklab_to_oklch(L: Array, a: Array, b: Array) -> Oklch:
    return Oklch(*lab_to_lch(L, a, b))


def oklch_to_oklab(L: Array, C: Array, H: Array) -> Oklab:
    return Oklab(*lch_to_lab(L, C, H))
