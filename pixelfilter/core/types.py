"""
Core data types for the pixel filter toolkit.

All types use @dataclass and Enum for structured, immutable representations.
No loose tuples at the internal API boundary.
"""

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Union

from .exceptions import MalformedInputError


CHANNEL_MIN = 0
CHANNEL_MAX = 255

CHANNEL_NAMES = ("red", "green", "blue", "alpha")


def clamp(value: Union[int, float]) -> int:
    """Saturate a numeric value into the [0, 255] channel range.

    In-range values are truncated toward zero. Infinities saturate; NaN
    raises ValueError.
    """
    if value == math.inf:
        return CHANNEL_MAX
    if value == -math.inf:
        return CHANNEL_MIN
    return max(CHANNEL_MIN, min(CHANNEL_MAX, int(value)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


class ValidationSeverity(Enum):
    """Validation issue severity."""
    ERROR = auto()
    WARNING = auto()


@dataclass(frozen=True)
class Pixel:
    """One RGBA pixel with 8-bit channels."""
    red: int
    green: int
    blue: int
    alpha: int = CHANNEL_MAX

    def __post_init__(self):
        for name in CHANNEL_NAMES:
            value = getattr(self, name)
            # bool is an int subclass but never a channel value
            if not isinstance(value, int) or isinstance(value, bool):
                raise MalformedInputError(
                    f"Pixel channel '{name}' must be an integer, got {type(value).__name__}"
                )
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise MalformedInputError(
                    f"Pixel channel '{name}' out of range [0, 255]: {value}"
                )

    def as_tuple(self) -> tuple:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def rgb_mean(self) -> float:
        """Real-valued mean of the three color channels."""
        return (self.red + self.green + self.blue) / 3.0


@dataclass
class PixelBuffer:
    """A decoded image: row-major pixels with a top-left origin."""
    width: int
    height: int
    pixels: List[Pixel] = field(default_factory=list)

    def index_of(self, column: int, row: int) -> int:
        """Flat index of a pixel position."""
        return row * self.width + column

    def pixel_at(self, column: int, row: int) -> Pixel:
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(f"Pixel ({column}, {row}) outside {self.width}x{self.height} image")
        return self.pixels[self.index_of(column, row)]

    def __len__(self) -> int:
        return len(self.pixels)


@dataclass
class ValidationIssue:
    """A validation problem."""
    severity: ValidationSeverity
    code: str
    message: str
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.code}: {self.message}"
