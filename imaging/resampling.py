"""
Fixed-point bilinear magnification.

All functions are pure: they take an input array and return a new output
without mutating the original. Arrays are 2D (height, width) uint8.

The stretch runs in two separable passes, horizontal then vertical, so the
interpolation weights are computed once per output column and once per
output row instead of once per output pixel. Weights are integers in
[0, 256]; a blend is ``(a * (256 - frac) + b * frac) >> 8``, which truncates
toward zero. This rounding rule is part of the output contract and must not
be swapped for round-to-nearest.

Only the trailing edge (right column, bottom row) needs clamping: with a
target no smaller than the source, source position 0 always maps inside.
For reference on this and other warps, see Wolberg, "Digital Image Warping",
1990.
"""

import numpy as np

from ._constants import FIXED_POINT_BITS, FIXED_POINT_ONE
from .errors import UnsupportedDownscale


def interpolation_weights(
    source_size: int,
    target_size: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Compute fixed-point source positions for every output index.

    Output index j maps to source position j * source_size / target_size.

    Args:
        source_size: Number of source samples along the axis.
        target_size: Number of output samples along the axis.

    Returns:
        Tuple of int64 arrays, each of length target_size:
        - positions: integral source index (floor of the position)
        - fractions: remainder scaled to [0, 256)
        - blend: True where positions + 1 is still a valid source index.
          False marks the clamp branch, where the last source sample is
          copied as-is.

    Examples:
        >>> positions, fractions, blend = interpolation_weights(2, 4)
        >>> positions.tolist(), fractions.tolist(), blend.tolist()
        ([0, 0, 1, 1], [0, 128, 0, 128], [True, True, False, False])
    """
    scaled = np.arange(target_size, dtype=np.int64) * source_size
    positions, remainders = np.divmod(scaled, target_size)
    fractions = (remainders << FIXED_POINT_BITS) // target_size
    blend = positions < source_size - 1
    return positions, fractions, blend


def _check_gray8(img: np.ndarray) -> None:
    if not isinstance(img, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, got {type(img).__name__}")
    if img.ndim != 2:
        raise ValueError(
            f"Image must be 2D array, got {img.ndim}D array with shape {img.shape}"
        )
    if img.size == 0:
        raise ValueError("Image array is empty")
    if img.dtype != np.uint8:
        raise TypeError(f"Expected uint8 pixels, got dtype {img.dtype}")


def stretch_horizontal(img: np.ndarray, target_width: int) -> np.ndarray:
    """Stretch (height, width) to (height, target_width).

    Args:
        img: 2D uint8 array, width <= target_width.
        target_width: Output width.

    Returns:
        New (height, target_width) uint8 array.
    """
    height, width = img.shape
    positions, fractions, blend = interpolation_weights(width, target_width)

    out = np.empty((height, target_width), dtype=np.uint8)
    # Clamp branch: copy the last column, never blend past it
    out[:, ~blend] = img[:, width - 1 : width]

    if blend.any():
        cols = positions[blend]
        frac = fractions[blend]
        wide = img.astype(np.int32)
        left = wide[:, cols]
        right = wide[:, cols + 1]
        mixed = (left * (FIXED_POINT_ONE - frac) + right * frac) >> FIXED_POINT_BITS
        out[:, blend] = mixed.astype(np.uint8)

    return out


def stretch_vertical(img: np.ndarray, target_height: int) -> np.ndarray:
    """Stretch (height, width) to (target_height, width).

    Mirror of stretch_horizontal with rows and columns swapped.

    Args:
        img: 2D uint8 array, height <= target_height.
        target_height: Output height.

    Returns:
        New (target_height, width) uint8 array.
    """
    height, width = img.shape
    positions, fractions, blend = interpolation_weights(height, target_height)

    out = np.empty((target_height, width), dtype=np.uint8)
    # Clamp branch: copy the last row
    out[~blend, :] = img[height - 1 : height, :]

    if blend.any():
        rows = positions[blend]
        frac = fractions[blend][:, np.newaxis]
        wide = img.astype(np.int32)
        top = wide[rows, :]
        bottom = wide[rows + 1, :]
        mixed = (top * (FIXED_POINT_ONE - frac) + bottom * frac) >> FIXED_POINT_BITS
        out[blend, :] = mixed.astype(np.uint8)

    return out


def rect_stretch(
    img: np.ndarray,
    target_width: int,
    target_height: int,
) -> np.ndarray:
    """Magnify a grayscale image to (target_height, target_width).

    Pure function: returns a new array without modifying the input.

    Args:
        img: 2D uint8 array of shape (height, width).
        target_width: Output width, >= width.
        target_height: Output height, >= height.

    Returns:
        New (target_height, target_width) uint8 array.

    Raises:
        UnsupportedDownscale: If the input is wider or taller than the target.
        TypeError: If img is not a uint8 numpy array.
        ValueError: If img is not 2D or is empty.

    Examples:
        >>> img = np.array([[10, 20]], dtype=np.uint8)
        >>> rect_stretch(img, 4, 1).tolist()
        [[10, 15, 20, 20]]
    """
    _check_gray8(img)

    height, width = img.shape
    if width > target_width or height > target_height:
        raise UnsupportedDownscale((width, height), (target_width, target_height))

    horiz = stretch_horizontal(img, target_width)
    return stretch_vertical(horiz, target_height)
