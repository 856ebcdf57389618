"""
Configuration for the rect stretch step.

The target size is held in an immutable StretchConfig. A step swaps in a new
config when its width or height changes, and each transform works from the
config it captured on entry.
"""

from dataclasses import dataclass, replace
from numbers import Integral

from .errors import InvalidDimension


def validate_dimension(name: str, value) -> int:
    """Check that a width or height is a strictly positive integer.

    Args:
        name: Dimension name used in the error ("width" or "height").
        value: Candidate value.

    Returns:
        The value as a plain int.

    Raises:
        TypeError: If value is not an integer (bools are rejected too).
        InvalidDimension: If value is zero or negative.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidDimension(name, value)
    return int(value)


@dataclass(frozen=True)
class StretchConfig:
    """Target rectangle for the rect stretch step.

    Attributes:
        target_width: Output width in pixels. Always > 0.
        target_height: Output height in pixels. Always > 0.
    """

    target_width: int
    target_height: int

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            InvalidDimension: If either dimension is not positive.
            TypeError: If either dimension is not an integer.
        """
        object.__setattr__(
            self, "target_width", validate_dimension("width", self.target_width)
        )
        object.__setattr__(
            self, "target_height", validate_dimension("height", self.target_height)
        )

    def with_width(self, target_width: int) -> "StretchConfig":
        return replace(self, target_width=target_width)

    def with_height(self, target_height: int) -> "StretchConfig":
        return replace(self, target_height=target_height)

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the target rectangle."""
        return self.target_width, self.target_height
