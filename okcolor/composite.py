"""End-to-end conversions between gamma-encoded sRGB and Oklab/Oklch.

Each function chains the single-step conversions in a fixed order:

    sRGB <-> linear sRGB <-> XYZ <-> Oklab <-> Oklch
"""

from ._backend import Array
from .lch import lab_to_lch, lch_to_lab
from .oklab import oklab_to_xyz, xyz_to_oklab
from .transfer import gamma_srgb_to_linear_srgb, linear_srgb_to_gamma_srgb
from .types import RGB, Oklab, Oklch
from .xyz import linear_srgb_to_xyz, xyz_to_linear_srgb


def oklab_to_rgb(l: Array, a: Array, b: Array) -> RGB:
    """Oklab -> gamma-encoded sRGB.

    Values may fall outside [0, 1] for colors outside the sRGB gamut; no
    clipping is applied.
    """
    xyz = oklab_to_xyz(l, a, b)
    linear = xyz_to_linear_srgb(*xyz)
    return linear_srgb_to_gamma_srgb(*linear)


def oklch_to_rgb(l: Array, c: Array, h: Array) -> RGB:
    """Oklch -> gamma-encoded sRGB. Hue in degrees."""
    return oklab_to_rgb(*lch_to_lab(l, c, h))


def rgb_to_oklab(r: Array, g: Array, b: Array) -> Oklab:
    """Gamma-encoded sRGB (0..1) -> Oklab."""
    linear = gamma_srgb_to_linear_srgb(r, g, b)
    xyz = linear_srgb_to_xyz(*linear)
    return xyz_to_oklab(*xyz)


def rgb_to_oklch(r: Array, g: Array, b: Array) -> Oklch:
    """Gamma-encoded sRGB (0..1) -> Oklch with hue in degrees [0, 360)."""
    return Oklch(*lab_to_lch(*rgb_to_oklab(r, g, b)))
