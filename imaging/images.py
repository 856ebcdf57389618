"""
Raster image variants exchanged between pipeline steps.

Every image is a fixed-size grid stored as a flat, row-major numpy array of
width * height elements (index = row * width + col). The three variants
differ only in element type and are tagged with an ImageVariant so steps can
check their input with a tag comparison.

Images own their pixel store: construction copies the caller's data, so a
later change to the source array never leaks into an image handed to a step.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

import numpy as np

from ._constants import GRAY8_MAX, GRAY8_MIN, GRAY32_MAX
from .config import validate_dimension


class ImageVariant(str, Enum):
    """Closed set of raster kinds."""

    GRAY8 = "gray8"
    GRAY32 = "gray32"
    COMPLEX32 = "complex32"

    def __str__(self) -> str:
        return self.value


class Image:
    """Abstract base class for raster images.

    Not constructible itself: build a Gray8Image, Gray32Image or
    Complex32Image. Subclasses set ``variant`` and ``dtype``; everything
    else is shared.

    Attributes:
        width: Number of columns. Always > 0.
        height: Number of rows. Always > 0.
        data: Flat numpy array of width * height pixels in row-major order.
    """

    variant: ClassVar[ImageVariant]
    dtype: ClassVar[np.dtype]

    def __init__(self, width: int, height: int, data=None):
        if not hasattr(type(self), "dtype"):
            raise TypeError(
                f"{type(self).__name__} is abstract, "
                "use Gray8Image, Gray32Image or Complex32Image"
            )
        self.width = validate_dimension("width", width)
        self.height = validate_dimension("height", height)
        count = self.width * self.height

        if data is None:
            self.data = np.zeros(count, dtype=self.dtype)
            return

        arr = np.asarray(data)
        if arr.size != count:
            raise ValueError(
                f"{type(self).__name__} of size ({self.width},{self.height}) "
                f"needs {count} pixels, got {arr.size}"
            )
        self._check_values(arr)
        self.data = arr.astype(self.dtype).reshape(count)

    def _check_values(self, arr: np.ndarray) -> None:
        """Reject element types or values the store cannot hold exactly."""
        if arr.dtype.kind not in "iu":
            raise TypeError(
                f"{type(self).__name__} needs integer pixels, got dtype {arr.dtype}"
            )
        min_value, max_value = self._value_range()
        low, high = int(arr.min()), int(arr.max())
        if low < min_value or high > max_value:
            raise ValueError(
                f"{type(self).__name__} pixels must be in [{min_value}, {max_value}], "
                f"got values in [{low}, {high}]"
            )

    def _value_range(self) -> tuple[int, int]:
        info = np.iinfo(self.dtype)
        return int(info.min), int(info.max)

    @classmethod
    def from_array(cls, array) -> "Image":
        """Build an image from a 2D (height, width) array."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(
                f"Image must be 2D array, got {arr.ndim}D array with shape {arr.shape}"
            )
        height, width = arr.shape
        return cls(width, height, arr)

    def to_array(self) -> np.ndarray:
        """Return a (height, width) copy of the pixel store."""
        return self.data.reshape(self.height, self.width).copy()

    def pixel(self, row: int, col: int):
        """Return the pixel at (row, col)."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"pixel ({row},{col}) outside {self.height}x{self.width} image"
            )
        return self.data[row * self.width + col]

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the image."""
        return self.width, self.height

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.variant is other.variant
            and self.size == other.size
            and np.array_equal(self.data, other.data)
        )

    def __str__(self) -> str:
        return f"{type(self).__name__} ({self.width},{self.height})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


class Gray8Image(Image):
    """8-bit grayscale raster.

    Pixels are stored as uint8, so the stored element is the semantic value
    in [0, 255]. Producers that deal in signed bytes convert with
    from_signed_bytes / to_signed_bytes, which reinterpret the bits and are
    exact inverses of each other.
    """

    variant = ImageVariant.GRAY8
    dtype = np.dtype(np.uint8)

    def _value_range(self) -> tuple[int, int]:
        return GRAY8_MIN, GRAY8_MAX

    @classmethod
    def from_signed_bytes(cls, width: int, height: int, data) -> "Gray8Image":
        """Build an image from signed bytes (-128 -> 128, -1 -> 255)."""
        signed = np.asarray(data, dtype=np.int8)
        return cls(width, height, signed.view(np.uint8))

    def to_signed_bytes(self) -> np.ndarray:
        """Return the pixels reinterpreted as int8 (128 -> -128, 255 -> -1)."""
        return self.data.view(np.int8).copy()


class Gray32Image(Image):
    """32-bit signed integer raster."""

    variant = ImageVariant.GRAY32
    dtype = np.dtype(np.int32)


class Complex32Image(Image):
    """Complex raster with single-precision real and imaginary parts."""

    variant = ImageVariant.COMPLEX32
    dtype = np.dtype(np.complex64)

    def _check_values(self, arr: np.ndarray) -> None:
        if arr.dtype.kind not in "iufc":
            raise TypeError(
                f"{type(self).__name__} needs numeric pixels, got dtype {arr.dtype}"
            )
        # Finite values beyond float32 range would silently become inf
        with np.errstate(over="ignore"):
            narrowed = arr.astype(self.dtype)
        overflow = np.isfinite(arr) & ~np.isfinite(narrowed)
        if overflow.any():
            raise ValueError(
                f"{type(self).__name__} pixels must fit in single precision, "
                f"got {arr.reshape(-1)[overflow.reshape(-1)][0]}"
            )

    @property
    def real(self) -> np.ndarray:
        return self.data.real.copy()

    @property
    def imag(self) -> np.ndarray:
        return self.data.imag.copy()

    def magnitude(self) -> np.ndarray:
        """Per-pixel magnitude as a flat int32 array.

        Computes sqrt(re**2 + im**2) in double precision and truncates toward
        zero, so (3, 4) gives exactly 5. Values above the int32 maximum
        saturate; NaN components give 0.

        Returns:
            int32 array of width * height magnitudes.
        """
        re = self.data.real.astype(np.float64)
        im = self.data.imag.astype(np.float64)
        mag = np.floor(np.hypot(re, im))
        mag = np.nan_to_num(mag, nan=0.0, posinf=GRAY32_MAX)
        return np.minimum(mag, GRAY32_MAX).astype(np.int32)
