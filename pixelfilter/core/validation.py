"""
Validation engine for pixel buffers.

Structured validation rules that must pass before processing.
Returns ValidationIssue list; ERROR severity blocks processing.
"""

import logging
from typing import List, Sequence

from .exceptions import MalformedInputError
from .types import Pixel, ValidationIssue, ValidationSeverity


logger = logging.getLogger(__name__)


class ValidationEngine:
    """Validates processing inputs."""

    @staticmethod
    def validate_buffer(
        pixels: Sequence,
        width: int,
        height: int,
    ) -> List[ValidationIssue]:
        """
        Validate a pixel buffer against its declared dimensions.

        Returns list of ValidationIssue; processing is blocked if any ERROR present.
        """
        issues = []

        # 1. Dimensions
        issues.extend(ValidationEngine._validate_dimensions(width, height))
        if issues:
            return issues

        # 2. Buffer length
        issues.extend(ValidationEngine._validate_length(pixels, width, height))

        # 3. Element types
        issues.extend(ValidationEngine._validate_pixels(pixels))

        return issues

    @staticmethod
    def raise_for_errors(issues: List[ValidationIssue]) -> None:
        """Raise MalformedInputError if any issue is an ERROR; log warnings."""
        errors = [i for i in issues if i.severity == ValidationSeverity.ERROR]
        warnings = [i for i in issues if i.severity == ValidationSeverity.WARNING]

        for issue in warnings:
            logger.warning("%s", issue)

        if errors:
            raise MalformedInputError(
                "; ".join(str(issue) for issue in errors),
                issues=errors,
            )

    @staticmethod
    def _validate_dimensions(width: int, height: int) -> List[ValidationIssue]:
        """Validate that width and height are non-negative integers."""
        issues = []

        for label, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or isinstance(value, bool):
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="INVALID_DIMENSION",
                        message=f"Image {label} must be an integer, got {value!r}.",
                        context={label: value},
                    )
                )
            elif value < 0:
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="NEGATIVE_DIMENSION",
                        message=f"Image {label} must be non-negative, got {value}.",
                        context={label: value},
                    )
                )

        return issues

    @staticmethod
    def _validate_length(pixels: Sequence, width: int, height: int) -> List[ValidationIssue]:
        """Validate that the buffer holds exactly width * height pixels."""
        issues = []
        expected = width * height

        if len(pixels) != expected:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="BUFFER_SIZE_MISMATCH",
                    message=(
                        f"Buffer holds {len(pixels)} pixels but "
                        f"{width}x{height} requires {expected}."
                    ),
                    context={"length": len(pixels), "width": width, "height": height},
                )
            )
        elif expected == 0:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="EMPTY_IMAGE",
                    message=f"Image is empty ({width}x{height}).",
                    context={"width": width, "height": height},
                )
            )

        return issues

    @staticmethod
    def _validate_pixels(pixels: Sequence) -> List[ValidationIssue]:
        """Validate that every element is a Pixel. Reports the first offender only."""
        issues = []

        for index, pixel in enumerate(pixels):
            if not isinstance(pixel, Pixel):
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="INVALID_PIXEL",
                        message=f"Element {index} is {type(pixel).__name__}, not Pixel.",
                        context={"index": index},
                    )
                )
                break

        return issues
