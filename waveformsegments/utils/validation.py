"""Validation utilities for WaveformSegments."""

import math
from collections.abc import Mapping
from typing import Any, Tuple

from waveformsegments.exceptions import InvalidArgumentError, ValidationError


def is_number(value: Any) -> bool:
    """Return True for real numbers, excluding bools and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def validate_descriptor(descriptor: Any, context: str = "add") -> Mapping:
    """Validate that a segment descriptor is a key-value mapping.

    Args:
        descriptor: The descriptor to validate
        context: Name of the calling operation, used in the error message

    Returns:
        The validated descriptor

    Raises:
        InvalidArgumentError: If the descriptor isn't a mapping, e.g. when
            called the old way with positional start and end times
    """
    if not isinstance(descriptor, Mapping):
        raise InvalidArgumentError(
            f"segments.{context}(): expected a segment mapping, got {type(descriptor).__name__}"
        )

    return descriptor


def validate_time_range(start_time: Any, end_time: Any) -> Tuple[float, float]:
    """Validate a segment's time range.

    Args:
        start_time: Start time in seconds
        end_time: End time in seconds

    Returns:
        Tuple of (start_time, end_time)

    Raises:
        ValidationError: If the time range is invalid
    """
    if not is_number(start_time):
        raise ValidationError(f"Start time must be a number: {start_time!r}")

    if not is_number(end_time):
        raise ValidationError(f"End time must be a number: {end_time!r}")

    if start_time < 0:
        raise ValidationError(f"Start time cannot be negative: {start_time}")

    if end_time < start_time:
        raise ValidationError(
            f"End time ({end_time}) must not be less than start time ({start_time})"
        )

    return (start_time, end_time)
