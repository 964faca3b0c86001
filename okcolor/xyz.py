"""CIE XYZ <-> linear sRGB (sRGB primaries, D65 white)."""

from ._backend import Array
from .matrices import LINEAR_SRGB_TO_XYZ, XYZ_TO_LINEAR_SRGB, apply
from .types import RGB, XYZ


def xyz_to_linear_srgb(x: Array, y: Array, z: Array) -> RGB:
    """XYZ -> linear sRGB, typically in the range 0..1."""
    return RGB(*apply(XYZ_TO_LINEAR_SRGB, x, y, z))


def linear_srgb_to_xyz(r: Array, g: Array, b: Array) -> XYZ:
    """Linear sRGB -> XYZ. White (1, 1, 1) maps to D65 (0.9505, 1.0, 1.089)."""
    return XYZ(*apply(LINEAR_SRGB_TO_XYZ, r, g, b))
