"""Color value types - one fixed-arity tuple per color space.

Every conversion returns one of these. They are plain tuples (unpackable,
indexable, comparable to other tuples) whose type records the space the
components belong to. Components may be floats, numpy arrays or torch
tensors depending on what was passed in.
"""

from typing import NamedTuple

from ._backend import Array


class RGB(NamedTuple):
    """Red, green, blue. Gamma-encoded or linear depending on the producer."""
    r: Array
    g: Array
    b: Array


class RGBA(NamedTuple):
    """RGB with a trailing alpha carried through unmodified."""
    r: Array
    g: Array
    b: Array
    a: Array


class HSV(NamedTuple):
    """Hue as a fraction of a turn, saturation and value."""
    h: Array
    s: Array
    v: Array


class XYZ(NamedTuple):
    """CIE 1931 tristimulus values (D65, Y of white = 1)."""
    x: Array
    y: Array
    z: Array


class Lab(NamedTuple):
    """Generic Cartesian lightness/opponent pair."""
    l: Array
    a: Array
    b: Array


class Lch(NamedTuple):
    """Generic cylindrical lightness/chroma/hue; hue in degrees [0, 360)."""
    l: Array
    c: Array
    h: Array


class Oklab(NamedTuple):
    l: Array
    a: Array
    b: Array


class Oklch(NamedTuple):
    l: Array
    c: Array
    h: Array
