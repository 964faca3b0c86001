"""sRGB transfer function: linear light <-> gamma-encoded sRGB."""

from . import _backend as B
from . import defaults
from ._backend import Array
from .types import RGB


def linear_to_gamma(x: Array) -> Array:
    """Linear sRGB -> gamma-encoded sRGB (one channel)."""
    x = B.as_float(x)
    low = x * defaults.SRGB_SLOPE
    high = (
        defaults.SRGB_SCALE
        * B.pow(B.clamp_min(x, defaults.SRGB_POW_FLOOR), 1 / defaults.SRGB_EXPONENT)
        - defaults.SRGB_OFFSET
    )
    return B.unwrap(B.where(x <= defaults.SRGB_LINEAR_THRESHOLD, low, high))


def gamma_to_linear(x: Array) -> Array:
    """Gamma-encoded sRGB -> linear sRGB (one channel)."""
    x = B.as_float(x)
    low = x / defaults.SRGB_SLOPE
    base = (x + defaults.SRGB_OFFSET) / defaults.SRGB_SCALE
    high = B.pow(B.clamp_min(base, defaults.SRGB_POW_FLOOR), defaults.SRGB_EXPONENT)
    return B.unwrap(B.where(x <= defaults.SRGB_GAMMA_THRESHOLD, low, high))


def linear_srgb_to_gamma_srgb(r: Array, g: Array, b: Array) -> RGB:
    """Apply sRGB gamma encoding to each channel of a linear color."""
    return RGB(linear_to_gamma(r), linear_to_gamma(g), linear_to_gamma(b))


def gamma_srgb_to_linear_srgb(r: Array, g: Array, b: Array) -> RGB:
    """Remove sRGB gamma encoding from each channel."""
    return RGB(gamma_to_linear(r), gamma_to_linear(g), gamma_to_linear(b))
