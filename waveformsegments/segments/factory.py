"""Turns loosely specified segment descriptors into Segment objects."""

from typing import Any, Dict, Mapping

from waveformsegments.exceptions import InvalidArgumentError
from waveformsegments.models.segment import Segment
from waveformsegments.segments.assignment import ColorCycler, SegmentIdGenerator
from waveformsegments.utils.validation import validate_descriptor

# Descriptor keys written for JavaScript hosts
_KEY_ALIASES = {
    "startTime": "start_time",
    "endTime": "end_time",
    "labelText": "label_text",
}

_SEGMENT_FIELDS = ("id", "start_time", "end_time", "editable", "color", "label_text")


class SegmentFactory:
    """Builds fully populated segments, filling in defaults."""

    def __init__(self, id_generator: SegmentIdGenerator, color_cycler: ColorCycler) -> None:
        self.id_generator = id_generator
        self.color_cycler = color_cycler

    def normalize(self, descriptor: Mapping[str, Any]) -> Segment:
        """Create a segment from a descriptor.

        Missing or None values are filled in: ``id`` and ``color`` from the
        assignment policy, ``label_text`` with an empty string and
        ``editable`` with False. Start and end times are passed through and
        checked by the segment itself. Unrecognized keys are kept unchanged in
        ``Segment.data``.

        Args:
            descriptor: Mapping describing the segment

        Returns:
            The new segment

        Raises:
            InvalidArgumentError: If the descriptor isn't a mapping, or its id
                isn't a string
            ValidationError: If the segment's times are invalid
        """
        validate_descriptor(descriptor)

        options: Dict[str, Any] = {}
        for key, value in descriptor.items():
            options[_KEY_ALIASES.get(key, key)] = value

        if options.get("id") is None:
            options["id"] = self.id_generator.next_id()

        if options.get("color") is None:
            options["color"] = self.color_cycler.next_color()

        if options.get("label_text") is None:
            options["label_text"] = ""

        if options.get("editable") is None:
            options["editable"] = False

        if not isinstance(options["id"], str):
            raise InvalidArgumentError(
                f"segments.add(): segment id must be a string, got {type(options['id']).__name__}"
            )

        fields = {name: options.pop(name, None) for name in _SEGMENT_FIELDS}

        # Whatever is left, including a key named "data", is kept as given
        return Segment(data=options, **fields)
