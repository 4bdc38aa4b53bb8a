"""Segment creation and storage components."""

from waveformsegments.segments.assignment import SEGMENT_COLORS, ColorCycler, SegmentIdGenerator
from waveformsegments.segments.factory import SegmentFactory
from waveformsegments.segments.repository import WaveformSegments

__all__ = [
    "SEGMENT_COLORS",
    "ColorCycler",
    "SegmentIdGenerator",
    "SegmentFactory",
    "WaveformSegments",
]
