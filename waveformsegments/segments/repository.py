"""Segment repository keeping an ordered list and an id index in step."""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

from waveformsegments.exceptions import DuplicateSegmentIdError, ReentrantMutationError
from waveformsegments.host.base import HostContext, get_option
from waveformsegments.host.events import SEGMENTS_ADD, SEGMENTS_REMOVE, SEGMENTS_REMOVE_ALL
from waveformsegments.models.segment import Segment
from waveformsegments.segments.assignment import ColorCycler, SegmentIdGenerator
from waveformsegments.segments.factory import SegmentFactory
from waveformsegments.utils.validation import is_number

# Set up logging
logger = logging.getLogger(__name__)


class WaveformSegments:
    """Adds, finds and removes the segments shown on a waveform.

    Segments are held twice: in insertion order and keyed by id. Every
    mutation updates both before the host is notified, and each instance
    has its own id counter and color cursor.
    """

    def __init__(self, host: HostContext, factory: Optional[SegmentFactory] = None) -> None:
        """Initialize the repository.

        Args:
            host: Host context supplying options and receiving notifications
            factory: Segment factory; by default one is built from the host options
        """
        self.host = host
        self.factory = factory or SegmentFactory(
            SegmentIdGenerator(get_option(host.options, "segment_id_prefix")),
            ColorCycler(host),
        )
        self._segments: List[Segment] = []
        self._segments_by_id: Dict[str, Segment] = {}
        self._emitting = False

    def __len__(self) -> int:
        return len(self._segments)

    # Notification

    @contextmanager
    def _notifying(self) -> Iterator[None]:
        self._emitting = True
        try:
            yield
        finally:
            self._emitting = False

    def _emit(self, event: str, *args: Any) -> None:
        with self._notifying():
            self.host.emit(event, *args)

    def _check_not_notifying(self, operation: str) -> None:
        if self._emitting:
            raise ReentrantMutationError(
                f"segments.{operation}() cannot be called from a segment event handler"
            )

    # Queries

    def get_segments(self) -> List[Segment]:
        """Get all segments in insertion order.

        Returns:
            A new list; changing it does not affect the repository
        """
        return list(self._segments)

    def get_segment(self, segment_id: str) -> Optional[Segment]:
        """Get the segment with the given id, or None if there is none."""
        try:
            return self._segments_by_id.get(segment_id)
        except TypeError:
            # Unhashable, so it can't be the id of any segment
            return None

    def get_segments_at_time(self, time: float) -> List[Segment]:
        """Get all segments that contain a point in time.

        A segment contains ``time`` when ``start_time <= time < end_time``.

        Args:
            time: Time in seconds

        Returns:
            Matching segments in insertion order
        """
        return [
            segment for segment in self._segments
            if segment.start_time <= time < segment.end_time
        ]

    def find(self, start_time: float, end_time: float) -> List[Segment]:
        """Get all segments that overlap a time region.

        Args:
            start_time: Start of the region in seconds
            end_time: End of the region in seconds

        Returns:
            Matching segments in insertion order
        """
        return [
            segment for segment in self._segments
            if segment.is_visible(start_time, end_time)
        ]

    # Adding

    def add(self, *descriptors: Any) -> List[Segment]:
        """Add one or more segments.

        Accepts a single descriptor, a list of descriptors, or several
        descriptors as separate arguments. Either every segment is added or,
        if any fails validation, none is.

        After adding, a ``segments.add`` event is emitted with all the new
        segments.

        Args:
            *descriptors: Segment descriptor mappings

        Returns:
            The added segments

        Raises:
            InvalidArgumentError: If a descriptor isn't a mapping
            ValidationError: If a descriptor has invalid times
            DuplicateSegmentIdError: If an id is already in use, either in
                the repository or earlier in the same batch
        """
        self._check_not_notifying("add")

        if len(descriptors) == 1 and isinstance(descriptors[0], (list, tuple)):
            descriptors = descriptors[0]

        segments = [self.factory.normalize(descriptor) for descriptor in descriptors]

        batch_ids = set()
        for segment in segments:
            if segment.id in self._segments_by_id or segment.id in batch_ids:
                raise DuplicateSegmentIdError(segment.id)
            batch_ids.add(segment.id)

        for segment in segments:
            self._segments.append(segment)
            self._segments_by_id[segment.id] = segment

        logger.debug(f"Added {len(segments)} segments, {len(self._segments)} in total")

        self._emit(SEGMENTS_ADD, list(segments))

        return segments

    # Removal

    def _find_indexes(self, predicate: Callable[[Segment], bool]) -> List[int]:
        return [
            index for index, segment in enumerate(self._segments)
            if predicate(segment)
        ]

    def _remove_indexes(self, indexes: List[int]) -> List[Segment]:
        removed: List[Segment] = []

        for index in indexes:
            # Every earlier removal shifts later segments one place left
            segment = self._segments.pop(index - len(removed))
            del self._segments_by_id[segment.id]
            removed.append(segment)

        return removed

    def _remove_segments(self, operation: str, predicate: Callable[[Segment], bool]) -> List[Segment]:
        """Remove every segment matching a predicate.

        Emits a ``segments.remove`` event with the removed segments, even
        when nothing matched.

        Args:
            operation: Name of the public method, for error messages
            predicate: Function returning True for segments to remove

        Returns:
            The removed segments
        """
        self._check_not_notifying(operation)

        removed = self._remove_indexes(self._find_indexes(predicate))

        logger.debug(f"Removed {len(removed)} segments, {len(self._segments)} remaining")

        self._emit(SEGMENTS_REMOVE, list(removed))

        return removed

    def remove(self, segment: Segment) -> List[Segment]:
        """Remove the given segment object."""
        return self._remove_segments("remove", lambda s: s is segment)

    def remove_by_id(self, segment_id: str) -> List[Segment]:
        """Remove the segment with the given id."""
        return self._remove_segments("remove_by_id", lambda s: s.id == segment_id)

    def remove_by_time(self, start_time: float, end_time: Optional[float] = None) -> List[Segment]:
        """Remove segments by start time, and optionally end time.

        Args:
            start_time: Segments starting at this time are removed
            end_time: If a number greater than zero, only segments that also
                end at this time are removed

        Returns:
            The removed segments
        """
        if is_number(end_time) and end_time > 0:
            def predicate(segment: Segment) -> bool:
                return segment.start_time == start_time and segment.end_time == end_time
        else:
            def predicate(segment: Segment) -> bool:
                return segment.start_time == start_time

        return self._remove_segments("remove_by_time", predicate)

    def remove_all(self) -> None:
        """Remove all segments and emit a ``segments.remove_all`` event."""
        self._check_not_notifying("remove_all")

        count = len(self._segments)
        self._segments = []
        self._segments_by_id = {}

        logger.debug(f"Removed all {count} segments")

        self._emit(SEGMENTS_REMOVE_ALL)
