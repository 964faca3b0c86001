"""Central place for okcolor numeric settings."""

# sRGB transfer function (IEC 61966-2-1)
SRGB_LINEAR_THRESHOLD: float = 0.0031308  # Linear-light breakpoint
SRGB_GAMMA_THRESHOLD: float = 0.04045     # Encoded breakpoint (12.92 * linear threshold)
SRGB_SLOPE: float = 12.92                 # Slope of the linear toe segment
SRGB_SCALE: float = 1.055
SRGB_OFFSET: float = 0.055
SRGB_EXPONENT: float = 2.4
SRGB_POW_FLOOR: float = 1e-10  # Keeps the unused power branch real for negative input

# Hue geometry
HUE_TURN_DEGREES: float = 360.0  # One full turn for Lch/Oklch hue
HSV_SECTORS: int = 6             # Hexcone faces, one per 60 degrees

# Import-time check that each constant matrix pair multiplies to identity
MATRIX_INVERSE_TOLERANCE: float = 1e-9
