"""Id and color assignment for segments created without them."""

import logging
from typing import List

from waveformsegments.config import get_config
from waveformsegments.host.base import HostContext, get_option

logger = logging.getLogger(__name__)

# Palette used when the host asks for randomized segment colors.
SEGMENT_COLORS: List[str] = [
    "#001f3f",  # navy
    "#0074d9",  # blue
    "#7fdbff",  # aqua
    "#39cccc",  # teal
    "#ffdc00",  # yellow
    "#ff851b",  # orange
    "#ff4136",  # red
    "#85144b",  # maroon
    "#f012be",  # fuchsia
    "#b10dc9",  # purple
]


class SegmentIdGenerator:
    """Issues "<prefix>.<n>" ids; n starts at 0 and never repeats."""

    def __init__(self, prefix: str = None) -> None:
        self.prefix = prefix or get_config("segment_id_prefix", "peaks.segment")
        self._counter = 0

    def next_id(self) -> str:
        """Return a new unique segment id."""
        segment_id = f"{self.prefix}.{self._counter}"
        self._counter += 1
        return segment_id


class ColorCycler:
    """Picks segment colors according to the host options."""

    def __init__(self, host: HostContext, palette: List[str] = None) -> None:
        """Initialize the color cycler.

        Args:
            host: Host context whose options are read on every request
            palette: Colors to cycle through when randomization is enabled
        """
        self.host = host
        self.palette = list(palette or SEGMENT_COLORS)
        self._index = 0

    def next_color(self) -> str:
        """Return the color for a new segment.

        With ``randomize_segment_color`` set, the cursor moves forward before
        reading, so the first color handed out is the palette's second entry.
        Otherwise the host's ``segment_color`` is returned.
        """
        options = self.host.options
        if get_option(options, "randomize_segment_color"):
            self._index = (self._index + 1) % len(self.palette)
            color = self.palette[self._index]
            logger.debug(f"Assigned palette color {color} (index {self._index})")
            return color

        return get_option(options, "segment_color", get_config("segment_color"))
