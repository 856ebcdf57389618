"""
Raster image pipeline steps.

This module provides typed raster images and single-input, single-output
steps that transform them. Steps validate their input synchronously and
never mutate it; every call produces a fresh output image.

Key components:
- images: Gray8Image, Gray32Image and Complex32Image raster variants
- config: StretchConfig immutable target size for the stretch step
- resampling: Pure fixed-point bilinear functions on numpy arrays
- steps: PipelineStep interface, RectStretchStep and MagnitudeStep
- errors: Typed errors, one class per failure kind

Sequencing several steps is left to the caller.
"""

from .config import StretchConfig
from .errors import (
    StageError,
    InvalidDimension,
    InvalidInputVariant,
    UnsupportedDownscale,
    NoOutputAvailable,
)
from .images import (
    ImageVariant,
    Image,
    Gray8Image,
    Gray32Image,
    Complex32Image,
)
from .resampling import (
    interpolation_weights,
    stretch_horizontal,
    stretch_vertical,
    rect_stretch,
)
from .steps import PipelineStep, RectStretchStep, MagnitudeStep

__all__ = [
    # Config
    "StretchConfig",
    # Errors
    "StageError",
    "InvalidDimension",
    "InvalidInputVariant",
    "UnsupportedDownscale",
    "NoOutputAvailable",
    # Images
    "ImageVariant",
    "Image",
    "Gray8Image",
    "Gray32Image",
    "Complex32Image",
    # Function API
    "interpolation_weights",
    "stretch_horizontal",
    "stretch_vertical",
    "rect_stretch",
    # Class-based API
    "PipelineStep",
    "RectStretchStep",
    "MagnitudeStep",
]
