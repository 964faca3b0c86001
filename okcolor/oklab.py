"""CIE XYZ <-> Oklab.

Reference: https://bottosson.github.io/posts/oklab/

Both directions are matrix -> elementwise nonlinearity -> matrix. The cube
root and cube are real and sign-preserving, so slightly out-of-gamut XYZ
values (negative LMS) convert without NaNs.
"""

from . import _backend as B
from ._backend import Array
from .matrices import LMS_TO_OKLAB, LMS_TO_XYZ, OKLAB_TO_LMS, XYZ_TO_LMS, apply
from .types import XYZ, Oklab


def xyz_to_oklab(x: Array, y: Array, z: Array) -> Oklab:
    """XYZ -> Oklab.

    Returns:
        Oklab(L, a, b), commonly in the range [0..1, -0.5..0.5, -0.5..0.5],
        though values may exceed the typical range.
    """
    l, m, s = apply(XYZ_TO_LMS, x, y, z)

    # Cube root (sign-preserving)
    l_, m_, s_ = B.cbrt(l), B.cbrt(m), B.cbrt(s)

    return Oklab(*apply(LMS_TO_OKLAB, l_, m_, s_))


def oklab_to_xyz(L: Array, a: Array, b: Array) -> XYZ:
    """Oklab -> XYZ."""
    l_, m_, s_ = apply(OKLAB_TO_LMS, L, a, b)

    # Cube to get LMS
    l, m, s = l_**3, m_**3, s_**3

    return XYZ(*apply(LMS_TO_XYZ, l, m, s))
