"""Utility functions for the waveformsegments package."""

from waveformsegments.utils.validation import (
    is_number,
    validate_descriptor,
    validate_time_range,
)

__all__ = [
    "is_number",
    "validate_descriptor",
    "validate_time_range",
]
