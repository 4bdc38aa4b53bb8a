"""
Custom exceptions for the waveformsegments package.
"""

class WaveformSegmentsError(Exception):
    """Base exception for the waveformsegments package."""
    pass


class ValidationError(WaveformSegmentsError):
    """Exception raised for validation errors."""
    pass


class InvalidArgumentError(ValidationError, TypeError):
    """Exception raised when a segment descriptor is not a mapping."""
    pass


class DuplicateSegmentIdError(ValidationError):
    """Exception raised when a segment id is already in use."""

    def __init__(self, segment_id: str) -> None:
        super().__init__(f"Duplicate segment id: {segment_id}")
        self.segment_id = segment_id


class ReentrantMutationError(WaveformSegmentsError):
    """Exception raised when a notification handler mutates the segments."""
    pass
