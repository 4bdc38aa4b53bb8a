"""Data models for WaveformSegments."""

from waveformsegments.models.segment import Segment

__all__ = ["Segment"]
