"""Name-based dispatch between the supported color spaces.

Routes any pair of spaces through CIE XYZ unless a direct conversion exists.
HSV is accepted as a source only.
"""

import logging
from typing import Callable, Sequence

from ._backend import Array
from .composite import oklab_to_rgb, oklch_to_rgb, rgb_to_oklab, rgb_to_oklch
from .errors import ChannelCountError, UnknownColorSpaceError, UnsupportedConversionError
from .hsv import hsv_to_rgb
from .lch import oklab_to_oklch, oklch_to_oklab
from .oklab import oklab_to_xyz, xyz_to_oklab
from .transfer import gamma_srgb_to_linear_srgb, linear_srgb_to_gamma_srgb
from .types import HSV, RGB, XYZ, Oklab, Oklch
from .xyz import linear_srgb_to_xyz, xyz_to_linear_srgb

logger = logging.getLogger(__name__)

Conversion = Callable[[Array, Array, Array], tuple]

_TYPES: dict[str, type] = {
    'rgb': RGB,
    'linear_rgb': RGB,
    'xyz': XYZ,
    'oklab': Oklab,
    'oklch': Oklch,
    'hsv': HSV,
}

_TO_XYZ: dict[str, Conversion] = {
    'rgb': lambda r, g, b: linear_srgb_to_xyz(*gamma_srgb_to_linear_srgb(r, g, b)),
    'linear_rgb': linear_srgb_to_xyz,
    'xyz': XYZ,
    'oklab': oklab_to_xyz,
    'oklch': lambda l, c, h: oklab_to_xyz(*oklch_to_oklab(l, c, h)),
    'hsv': lambda h, s, v: linear_srgb_to_xyz(*gamma_srgb_to_linear_srgb(*hsv_to_rgb(h, s, v))),
}

_FROM_XYZ: dict[str, Conversion] = {
    'rgb': lambda x, y, z: linear_srgb_to_gamma_srgb(*xyz_to_linear_srgb(x, y, z)),
    'linear_rgb': xyz_to_linear_srgb,
    'xyz': XYZ,
    'oklab': xyz_to_oklab,
    'oklch': lambda x, y, z: oklab_to_oklch(*xyz_to_oklab(x, y, z)),
}

# Pairs with a dedicated single-call conversion
_DIRECT: dict[tuple[str, str], Conversion] = {
    ('hsv', 'rgb'): hsv_to_rgb,
    ('rgb', 'linear_rgb'): gamma_srgb_to_linear_srgb,
    ('linear_rgb', 'rgb'): linear_srgb_to_gamma_srgb,
    ('rgb', 'oklab'): rgb_to_oklab,
    ('rgb', 'oklch'): rgb_to_oklch,
    ('oklab', 'rgb'): oklab_to_rgb,
    ('oklch', 'rgb'): oklch_to_rgb,
    ('oklab', 'oklch'): oklab_to_oklch,
    ('oklch', 'oklab'): oklch_to_oklab,
}


def list_color_spaces() -> list[str]:
    """List all color space names accepted by convert()."""
    return list(_TYPES.keys())


def _resolve(name: str) -> str:
    key = str(name).strip().lower()
    if key not in _TYPES:
        raise UnknownColorSpaceError(
            f"Unknown color space: {name!r} (expected one of {', '.join(_TYPES)})"
        )
    return key


def convert(values: Sequence[Array], source: str, target: str) -> tuple:
    """Convert a three-component color between two named spaces.

    Args:
        values: (c0, c1, c2) in the source space; components may be floats,
            numpy arrays or torch tensors
        source: Name of the source space (see list_color_spaces())
        target: Name of the target space; 'hsv' is not a valid target

    Returns:
        The color as the target space's tuple type (RGB, XYZ, Oklab, ...)

    Raises:
        UnknownColorSpaceError: source or target is not a known space
        UnsupportedConversionError: target is 'hsv'
        ChannelCountError: values does not have exactly three components
    """
    src = _resolve(source)
    dst = _resolve(target)
    if dst not in _FROM_XYZ:
        raise UnsupportedConversionError(f"Conversion to {target!r} is not supported")

    components = tuple(values)
    if len(components) != 3:
        raise ChannelCountError(
            f"Expected 3 components for {source!r}, got {len(components)}"
        )

    if src == dst:
        return _TYPES[dst](*components)

    direct = _DIRECT.get((src, dst))
    if direct is not None:
        logger.debug("convert %s -> %s: direct", src, dst)
        return direct(*components)

    logger.debug("convert %s -> %s: via xyz", src, dst)
    xyz = _TO_XYZ[src](*components)
    return _FROM_XYZ[dst](*xyz)
