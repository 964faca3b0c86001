"""Color space conversions: HSV, sRGB, linear sRGB, CIE XYZ, Oklab and Oklch.

This package provides:
- HSV -> sRGB with hue wraparound
- sRGB gamma encoding/decoding
- XYZ <-> linear sRGB and XYZ <-> Oklab
- Lab <-> Lch (Cartesian <-> cylindrical)
- End-to-end sRGB <-> Oklab/Oklch composites and name-based convert()
- Backend-agnostic: works with floats, numpy arrays or torch tensors

Example:
    from okcolor import rgb_to_oklch, oklch_to_rgb

    L, C, H = rgb_to_oklch(0.1, 0.5, 0.8)   # ~(0.582, 0.146, 248)
    r, g, b = oklch_to_rgb(L, C, H + 180)  # complementary hue
"""

from .hsv import hsv_to_rgb

from .transfer import (
    linear_to_gamma,
    gamma_to_linear,
    linear_srgb_to_gamma_srgb,
    gamma_srgb_to_linear_srgb,
)

from .xyz import xyz_to_linear_srgb, linear_srgb_to_xyz
from .oklab import xyz_to_oklab, oklab_to_xyz
from .lch import lab_to_lch, lch_to_lab, oklab_to_oklch, oklch_to_oklab

from .composite import oklab_to_rgb, oklch_to_rgb, rgb_to_oklab, rgb_to_oklch

from .convert import convert, list_color_spaces

from .types import RGB, RGBA, HSV, XYZ, Lab, Lch, Oklab, Oklch

from .errors import (
    ColorError,
    MatrixError,
    UnknownColorSpaceError,
    UnsupportedConversionError,
    ChannelCountError,
)

__all__ = [
    # Primitive conversions
    'hsv_to_rgb',
    'linear_to_gamma',
    'gamma_to_linear',
    'linear_srgb_to_gamma_srgb',
    'gamma_srgb_to_linear_srgb',
    'lab_to_lch',
    'lch_to_lab',
    'oklab_to_oklch',
    'oklch_to_oklab',
    # Matrix conversions
    'xyz_to_linear_srgb',
    'linear_srgb_to_xyz',
    'xyz_to_oklab',
    'oklab_to_xyz',
    # Composites
    'oklab_to_rgb',
    'oklch_to_rgb',
    'rgb_to_oklab',
    'rgb_to_oklch',
    'convert',
    'list_color_spaces',
    # Value types
    'RGB',
    'RGBA',
    'HSV',
    'XYZ',
    'Lab',
    'Lch',
    'Oklab',
    'Oklch',
    # Errors
    'ColorError',
    'MatrixError',
    'UnknownColorSpaceError',
    'UnsupportedConversionError',
    'ChannelCountError',
]
