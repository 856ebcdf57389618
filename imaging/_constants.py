"""Shared numeric constants for the raster stages.

Stages and resampling functions import these rather than hard-coding values.
"""

# =============================================================================
# FIXED-POINT INTERPOLATION
# =============================================================================

# Interpolation weights are integers scaled by 2**FIXED_POINT_BITS.
# A right shift by this many bits performs the (truncating) division.
FIXED_POINT_BITS = 8

# Weight representing a fraction of 1.0 (256 at 8 bits)
FIXED_POINT_ONE = 1 << FIXED_POINT_BITS

# =============================================================================
# PIXEL RANGES
# =============================================================================

# Semantic range of a grayscale-8 pixel
GRAY8_MIN = 0
GRAY8_MAX = 255

# Magnitudes above this saturate when stored in a grayscale-32 image
GRAY32_MAX = 2**31 - 1
