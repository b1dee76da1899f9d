"""
Filter definitions for the processing pipeline.

Each filter pairs a selection predicate (matches) with a per-pixel transform
(apply). Tunables are declared once per class as FilterParameter entries and
bound as frozen dataclass fields at construction time.
"""

import math
from dataclasses import dataclass, fields, replace
from enum import Enum, auto
from typing import Any, ClassVar, Dict, List, Optional, Type

from ..core import (
    FilterNotFoundError,
    InvalidParameterError,
    Pixel,
    clamp,
    round_half_up,
)


class ParameterType(Enum):
    """Type of filter parameter."""
    FLOAT = auto()
    INT = auto()


@dataclass(frozen=True)
class FilterParameter:
    """Schema entry for a single filter parameter."""
    name: str
    param_type: ParameterType
    default: Any
    min_val: Optional[float] = None
    max_val: Optional[float] = None
    description: str = ""

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate a parameter value. Returns (is_valid, error_message)."""

        if isinstance(value, bool):
            return False, f"{self.name} must be a number, not a boolean"

        if self.param_type == ParameterType.FLOAT:
            if not isinstance(value, (int, float)):
                return False, f"{self.name} must be a number"
            if isinstance(value, float) and not math.isfinite(value):
                return False, f"{self.name} must be a finite number"
            if self.min_val is not None and value < self.min_val:
                return False, f"{self.name} must be >= {self.min_val}"
            if self.max_val is not None and value > self.max_val:
                return False, f"{self.name} must be <= {self.max_val}"

        elif self.param_type == ParameterType.INT:
            if not isinstance(value, int):
                return False, f"{self.name} must be an integer"
            if self.min_val is not None and value < self.min_val:
                return False, f"{self.name} must be >= {int(self.min_val)}"
            if self.max_val is not None and value > self.max_val:
                return False, f"{self.name} must be <= {int(self.max_val)}"

        return True, ""


@dataclass(frozen=True)
class PixelFilter:
    """Base class for all pixel filters.

    The base filter matches every pixel and returns it unchanged. Subclasses
    override ``apply`` to transform pixels and may override ``matches`` to
    restrict which pixels they touch.
    """
    filter_id: ClassVar[str] = "identity"
    name: ClassVar[str] = "Identity"
    category: ClassVar[str] = "Utility"
    PARAMETERS: ClassVar[Dict[str, FilterParameter]] = {}

    def __post_init__(self):
        is_valid, errors = self.validate_parameters()
        if not is_valid:
            raise InvalidParameterError(self.filter_id, errors)

    def matches(self, pixel: Pixel) -> bool:
        """Whether this filter applies to the given pixel."""
        return True

    def apply(self, pixel: Pixel) -> Pixel:
        """Transform a single pixel."""
        return pixel

    def validate_parameters(self) -> tuple[bool, List[str]]:
        """Validate all parameters. Returns (is_valid, list_of_errors)."""
        errors = []
        for key, param in self.PARAMETERS.items():
            is_valid, error_msg = param.validate(getattr(self, key))
            if not is_valid:
                errors.append(error_msg)
        return len(errors) == 0, errors

    def get_parameters(self) -> Dict[str, Any]:
        """Current parameter values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


# ============================================================================
# FILTER IMPLEMENTATIONS
# ============================================================================

@dataclass(frozen=True)
class EnhancedRedFilter(PixelFilter):
    """Shift the red channel by a fixed amount."""
    filter_id: ClassVar[str] = "enhanced_red"
    name: ClassVar[str] = "Enhanced Red"
    category: ClassVar[str] = "Color"
    PARAMETERS: ClassVar[Dict[str, FilterParameter]] = {
        "shift": FilterParameter(
            name="Shift",
            param_type=ParameterType.INT,
            default=10,
            min_val=-255,
            max_val=255,
            description="Amount added to the red channel",
        ),
    }

    shift: int = 10

    def apply(self, pixel: Pixel) -> Pixel:
        return replace(pixel, red=clamp(pixel.red + self.shift))


@dataclass(frozen=True)
class BlackAndWhiteFilter(PixelFilter):
    """Replace red, green and blue with their rounded mean."""
    filter_id: ClassVar[str] = "black_and_white"
    name: ClassVar[str] = "Black & White"
    category: ClassVar[str] = "Color"

    def apply(self, pixel: Pixel) -> Pixel:
        gray = clamp(round_half_up(pixel.rgb_mean))
        return Pixel(gray, gray, gray, pixel.alpha)


@dataclass(frozen=True)
class HalfBrightnessFilter(PixelFilter):
    """Darken by integer division. Truncates, never rounds."""
    filter_id: ClassVar[str] = "half_brightness"
    name: ClassVar[str] = "50% Brightness"
    category: ClassVar[str] = "Tone"
    PARAMETERS: ClassVar[Dict[str, FilterParameter]] = {
        "divisor": FilterParameter(
            name="Divisor",
            param_type=ParameterType.INT,
            default=2,
            min_val=1,
            max_val=255,
            description="Each color channel is divided by this value",
        ),
    }

    divisor: int = 2

    def apply(self, pixel: Pixel) -> Pixel:
        return Pixel(
            pixel.red // self.divisor,
            pixel.green // self.divisor,
            pixel.blue // self.divisor,
            pixel.alpha,
        )


@dataclass(frozen=True)
class HalfBrighterFilter(PixelFilter):
    """Brighten by a multiplier, rounding to nearest."""
    filter_id: ClassVar[str] = "half_brighter"
    name: ClassVar[str] = "50% Brighter"
    category: ClassVar[str] = "Tone"
    PARAMETERS: ClassVar[Dict[str, FilterParameter]] = {
        "factor": FilterParameter(
            name="Factor",
            param_type=ParameterType.FLOAT,
            default=1.5,
            min_val=0.0,
            max_val=255.0,
            description="Brightness multiplier (1.0 = no change)",
        ),
    }

    factor: float = 1.5

    def apply(self, pixel: Pixel) -> Pixel:
        return Pixel(
            self._scale(pixel.red),
            self._scale(pixel.green),
            self._scale(pixel.blue),
            pixel.alpha,
        )

    def _scale(self, channel: int) -> int:
        return clamp(round_half_up(channel * self.factor))


@dataclass(frozen=True)
class BalanceFilter(PixelFilter):
    """Pull each color channel toward the pixel's mean, reducing saturation."""
    filter_id: ClassVar[str] = "balance"
    name: ClassVar[str] = "Balance"
    category: ClassVar[str] = "Color"
    PARAMETERS: ClassVar[Dict[str, FilterParameter]] = {
        "blend": FilterParameter(
            name="Blend",
            param_type=ParameterType.FLOAT,
            default=0.5,
            min_val=-1.0,
            max_val=10.0,
            description="Weight of each channel's distance from the mean",
        ),
    }

    blend: float = 0.5

    def apply(self, pixel: Pixel) -> Pixel:
        balance_point = pixel.rgb_mean
        return Pixel(
            self._balance(pixel.red, balance_point),
            self._balance(pixel.green, balance_point),
            self._balance(pixel.blue, balance_point),
            pixel.alpha,
        )

    def _balance(self, channel: int, balance_point: float) -> int:
        delta = channel - balance_point
        return clamp(round_half_up(channel + delta * self.blend))


# Filter classes by id
FILTER_TYPES: Dict[str, Type[PixelFilter]] = {
    "enhanced_red": EnhancedRedFilter,
    "black_and_white": BlackAndWhiteFilter,
    "half_brightness": HalfBrightnessFilter,
    "half_brighter": HalfBrighterFilter,
    "balance": BalanceFilter,
}


def create_filter(filter_id: str, **parameters: Any) -> PixelFilter:
    """Create a validated filter instance by ID.

    Raises FilterNotFoundError for unknown ids and InvalidParameterError for
    unknown parameter names or out-of-range values.
    """
    if filter_id not in FILTER_TYPES:
        raise FilterNotFoundError(filter_id, FILTER_TYPES.keys())

    filter_class = FILTER_TYPES[filter_id]
    unknown = sorted(set(parameters) - set(filter_class.PARAMETERS))
    if unknown:
        raise InvalidParameterError(
            filter_id, [f"unknown parameter '{key}'" for key in unknown]
        )
    return filter_class(**parameters)


def get_filters_by_category(category: str) -> List[PixelFilter]:
    """Get default instances of all filters in a specific category."""
    filters = []
    for filter_class in FILTER_TYPES.values():
        if filter_class.category == category:
            filters.append(filter_class())
    return filters


def get_all_categories() -> List[str]:
    """Get all filter categories in order."""
    categories = []
    for filter_class in FILTER_TYPES.values():
        if filter_class.category not in categories:
            categories.append(filter_class.category)

    preferred_order = ["Color", "Tone"]

    # Return in preferred order, then any others
    result = [cat for cat in preferred_order if cat in categories]
    result.extend(cat for cat in categories if cat not in result)
    return result
