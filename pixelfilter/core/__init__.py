"""Core data types, errors and validation for the pixel filter toolkit."""

from .exceptions import (
    PixelFilterError,
    FilterNotFoundError,
    MalformedInputError,
    InvalidParameterError,
    SerializationError,
    ImageIOError,
)
from .types import (
    CHANNEL_MIN,
    CHANNEL_MAX,
    Pixel,
    PixelBuffer,
    ValidationIssue,
    ValidationSeverity,
    clamp,
    round_half_up,
)
from .validation import ValidationEngine

__all__ = [
    "PixelFilterError",
    "FilterNotFoundError",
    "MalformedInputError",
    "InvalidParameterError",
    "SerializationError",
    "ImageIOError",
    "CHANNEL_MIN",
    "CHANNEL_MAX",
    "Pixel",
    "PixelBuffer",
    "ValidationIssue",
    "ValidationSeverity",
    "clamp",
    "round_half_up",
    "ValidationEngine",
]
