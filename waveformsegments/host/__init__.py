"""Host context: configuration and event notification."""

from waveformsegments.host.base import HostContext
from waveformsegments.host.event_host import EventHost
from waveformsegments.host.events import (
    SEGMENTS_ADD,
    SEGMENTS_REMOVE,
    SEGMENTS_REMOVE_ALL,
)

__all__ = [
    "HostContext",
    "EventHost",
    "SEGMENTS_ADD",
    "SEGMENTS_REMOVE",
    "SEGMENTS_REMOVE_ALL",
]
