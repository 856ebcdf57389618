"""
Pipeline step classes with a common interface.

Each step accepts exactly one image of a known variant, validates it, and
produces exactly one new image. The result is returned from transform() and
also kept as the step's last output for callers that fetch it separately.

Usage:
    from imaging import Gray8Image, RectStretchStep

    step = RectStretchStep(target_width=640, target_height=480)
    stretched = step.transform(Gray8Image.from_array(pixels))
"""

import logging
from abc import ABC, abstractmethod

from .config import StretchConfig
from .errors import InvalidInputVariant, NoOutputAvailable
from .images import Complex32Image, Gray8Image, Gray32Image, Image, ImageVariant
from .resampling import rect_stretch

logger = logging.getLogger(__name__)


class PipelineStep(ABC):
    """Base class for pipeline steps.

    Subclasses declare the input variant they accept and implement
    _compute(). The base class performs the variant check and owns the
    last-output slot, which is only replaced once a full result exists.
    Steps hold no state between calls other than their configuration.
    """

    expected_variant: ImageVariant

    def __init__(self):
        self._output: Image | None = None

    def transform(self, image: Image) -> Image:
        """Validate the input, compute a new image and record it as the output.

        Never mutates the input image.

        Args:
            image: Input image. Must be of ``expected_variant``.

        Returns:
            The newly created output image.

        Raises:
            InvalidInputVariant: If image is not of the expected variant.
            StageError: Any step-specific precondition failure. The previous
                output is left in place.
        """
        if not isinstance(image, Image) or image.variant is not self.expected_variant:
            actual = image if isinstance(image, Image) else type(image).__name__
            raise InvalidInputVariant(actual, self.expected_variant)

        result = self._compute(image)
        logger.debug("%s: %s -> %s", self.name, image, result)
        self._output = result
        return result

    @abstractmethod
    def _compute(self, image: Image) -> Image:
        """Produce the output for an input that already passed the variant check."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging and debugging."""
        pass

    @property
    def has_output(self) -> bool:
        return self._output is not None

    def get_output(self) -> Image:
        """Return the image produced by the last successful transform.

        Raises:
            NoOutputAvailable: If transform has not succeeded yet.
        """
        if self._output is None:
            raise NoOutputAvailable(self.name)
        return self._output

    def __str__(self) -> str:
        return self.name


class RectStretchStep(PipelineStep):
    """Stretch a grayscale image to a larger rectangle with bilinear interpolation.

    Magnification only: an input wider or taller than the target is rejected
    rather than subsampled. Interpolation uses 1/256 fixed-point weights, see
    imaging.resampling for the exact arithmetic.

    Attributes:
        width: Target width. Setting it validates and affects the next transform.
        height: Target height. Setting it validates and affects the next transform.
    """

    expected_variant = ImageVariant.GRAY8

    def __init__(self, target_width: int, target_height: int):
        super().__init__()
        self._config = StretchConfig(target_width, target_height)

    @property
    def config(self) -> StretchConfig:
        return self._config

    @property
    def width(self) -> int:
        return self._config.target_width

    @width.setter
    def width(self, value: int) -> None:
        self._config = self._config.with_width(value)

    @property
    def height(self) -> int:
        return self._config.target_height

    @height.setter
    def height(self, value: int) -> None:
        self._config = self._config.with_height(value)

    def _compute(self, image: Gray8Image) -> Gray8Image:
        # Work from one snapshot so a setter call cannot split the two passes
        config = self._config
        pixels = image.data.reshape(image.height, image.width)
        stretched = rect_stretch(pixels, config.target_width, config.target_height)
        return Gray8Image.from_array(stretched)

    @property
    def name(self) -> str:
        return f"rect_stretch({self.width},{self.height})"


class MagnitudeStep(PipelineStep):
    """Convert a complex image to a 32-bit grayscale image of pixel magnitudes.

    See Complex32Image.magnitude for the numeric rule.
    """

    expected_variant = ImageVariant.COMPLEX32

    def _compute(self, image: Complex32Image) -> Gray32Image:
        return Gray32Image(image.width, image.height, image.magnitude())

    @property
    def name(self) -> str:
        return "magnitude"
