"""
Error types raised by raster images and pipeline steps.

Every error is a precondition violation detected when a call starts, before
any output is produced. Callers distinguish the kinds by class, not by
message text. Each class also derives from the builtin exception that
matches its meaning, so generic ``except ValueError`` handlers keep working.
"""

from __future__ import annotations

from typing import Any


class StageError(Exception):
    """Base class for all raster stage errors."""


class InvalidDimension(StageError, ValueError):
    """A width or height is not strictly positive.

    Attributes:
        name: Which dimension was rejected ("width" or "height").
        value: The rejected value.
    """

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be positive, not {value}")


class InvalidInputVariant(StageError, TypeError):
    """The image passed to a step is not the variant the step requires.

    Attributes:
        actual: Description of what was received (variant name or type name).
        expected: The variant the step accepts.
    """

    def __init__(self, actual: Any, expected: Any):
        self.actual = actual
        self.expected = expected
        super().__init__(f"{actual} should be a {expected} image, but isn't")


class UnsupportedDownscale(StageError, ValueError):
    """A stretch input is larger than the target in width or height.

    Attributes:
        input_size: (width, height) of the rejected input.
        target_size: (width, height) the step was configured with.
    """

    def __init__(self, input_size: tuple[int, int], target_size: tuple[int, int]):
        self.input_size = input_size
        self.target_size = target_size
        super().__init__(
            "rect stretch only magnifies, but input size is "
            f"({input_size[0]},{input_size[1]}) and target size is "
            f"({target_size[0]},{target_size[1]})"
        )


class NoOutputAvailable(StageError, LookupError):
    """A step's output was requested before any transform succeeded."""

    def __init__(self, step_name: str):
        self.step_name = step_name
        super().__init__(f"{step_name} has not produced an output yet")
