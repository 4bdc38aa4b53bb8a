"""
WaveformSegments - labeled time intervals for a waveform timeline.
"""

__version__ = "0.1.0"

from waveformsegments.host.event_host import EventHost
from waveformsegments.models.segment import Segment
from waveformsegments.segments.repository import WaveformSegments

__all__ = ["EventHost", "Segment", "WaveformSegments"]
