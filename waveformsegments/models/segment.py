"""
Segment model representing a labeled time interval on a waveform timeline.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from waveformsegments.utils.validation import validate_time_range


@dataclass(eq=False)
class Segment:
    """A labeled time interval anchored to the media timeline.

    Segments compare by identity: two segments with the same times and
    label are still different annotations.
    """

    id: str
    start_time: float
    end_time: float

    # Display hints
    editable: bool = False
    color: Optional[str] = None
    label_text: str = ""

    # Any other fields supplied by the caller, passed through untouched
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_time_range(self.start_time, self.end_time)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Segment id cannot be changed once assigned")

        # Both times exist only after __init__, which __post_init__ checks
        if "start_time" in self.__dict__ and "end_time" in self.__dict__:
            if name == "start_time":
                validate_time_range(value, self.end_time)
            elif name == "end_time":
                validate_time_range(self.start_time, value)

        super().__setattr__(name, value)

    def set_times(self, start_time: float, end_time: float) -> None:
        """Move both ends of the segment at once.

        Assigning ``start_time`` and ``end_time`` one by one checks each
        against the other's old value, which rejects some valid moves.

        Raises:
            ValidationError: If the new time range is invalid
        """
        validate_time_range(start_time, end_time)
        self.__dict__["start_time"] = start_time
        self.__dict__["end_time"] = end_time

    @property
    def duration(self) -> float:
        """Get the duration of this segment in seconds."""
        return self.end_time - self.start_time

    def is_visible(self, start_time: float, end_time: float) -> bool:
        """Check whether this segment overlaps the given time region.

        Args:
            start_time: Start of the region in seconds
            end_time: End of the region in seconds

        Returns:
            True if any part of the segment lies inside the region
        """
        return self.start_time < end_time and start_time < self.end_time

    def to_dict(self) -> Dict[str, Any]:
        """Return the segment as a plain descriptor mapping."""
        result = dict(self.data)
        result.update(
            id=self.id,
            start_time=self.start_time,
            end_time=self.end_time,
            editable=self.editable,
            color=self.color,
            label_text=self.label_text,
        )
        return result
