"""Constant transformation matrices.

Reference: https://bottosson.github.io/posts/oklab/

Matrices are stored row-major as tuples of Python floats so they multiply
cleanly against floats, numpy arrays and torch tensors alike. Inverses are
derived once at import and checked against the forward matrix.
"""

import logging

import numpy as np

from . import defaults
from ._backend import Array
from .errors import MatrixError

logger = logging.getLogger(__name__)

Matrix = tuple[tuple[float, float, float], ...]


def invert(matrix: Matrix) -> Matrix:
    """Exact (double precision) inverse of a 3x3 matrix, as nested tuples."""
    inv = np.linalg.inv(np.array(matrix, dtype=np.float64))
    return tuple(tuple(float(v) for v in row) for row in inv)


def check_inverse(
    forward: Matrix,
    inverse: Matrix,
    name: str,
    tolerance: float = defaults.MATRIX_INVERSE_TOLERANCE,
) -> float:
    """Verify inverse @ forward ~= I. Returns the worst residual.

    Raises:
        MatrixError: if any element deviates from identity by more than
            ``tolerance``.
    """
    product = np.array(inverse) @ np.array(forward)
    residual = float(np.abs(product - np.eye(3)).max())
    logger.debug("Inverse check for %s: max residual %.3g", name, residual)
    if not residual <= tolerance:
        raise MatrixError(
            f"{name}: inverse does not reproduce identity "
            f"(max residual {residual:.3g} > {tolerance:.3g})"
        )
    return residual


def apply(matrix: Matrix, x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    """Multiply a 3x3 matrix by the column vector (x, y, z)."""
    (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = matrix
    return (
        m00*x + m01*y + m02*z,
        m10*x + m11*y + m12*z,
        m20*x + m21*y + m22*z,
    )


# === XYZ <-> Oklab ===

# M1: XYZ -> LMS
XYZ_TO_LMS: Matrix = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
)

# M2: LMS cube root -> Oklab
LMS_TO_OKLAB: Matrix = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

OKLAB_TO_LMS: Matrix = invert(LMS_TO_OKLAB)
LMS_TO_XYZ: Matrix = invert(XYZ_TO_LMS)


# === Linear sRGB <-> XYZ (sRGB primaries, D65) ===

LINEAR_SRGB_TO_XYZ: Matrix = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

XYZ_TO_LINEAR_SRGB: Matrix = invert(LINEAR_SRGB_TO_XYZ)


for _forward, _inverse, _name in (
    (XYZ_TO_LMS, LMS_TO_XYZ, "XYZ_TO_LMS"),
    (LMS_TO_OKLAB, OKLAB_TO_LMS, "LMS_TO_OKLAB"),
    (LINEAR_SRGB_TO_XYZ, XYZ_TO_LINEAR_SRGB, "LINEAR_SRGB_TO_XYZ"),
):
    check_inverse(_forward, _inverse, _name)
del _forward, _inverse, _name
