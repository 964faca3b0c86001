"""Color conversion errors.

The conversion functions themselves never raise for numeric input; these
errors cover the constant tables and the name-based dispatch in
:mod:`okcolor.convert`.
"""


class ColorError(Exception):
    """Base class for okcolor errors."""
    pass


class MatrixError(ColorError):
    """A constant matrix and its inverse do not multiply to identity."""
    pass


class UnknownColorSpaceError(ColorError, ValueError):
    """Reference to a color space name that is not registered."""
    pass


class UnsupportedConversionError(ColorError, ValueError):
    """The requested direction is not defined (e.g. anything -> HSV)."""
    pass


class ChannelCountError(ColorError, ValueError):
    """Color value has the wrong number of components."""
    pass
