"""Shared fixtures for WaveformSegments tests."""

from unittest import mock

import pytest

from waveformsegments.host.event_host import EventHost
from waveformsegments.segments.repository import WaveformSegments


@pytest.fixture
def host():
    """Host with fixed options and a mocked emit so notifications can be checked."""
    host = EventHost(randomize_segment_color=False, segment_color="#aabbcc")
    host.emit = mock.MagicMock(wraps=host.emit)
    return host


@pytest.fixture
def segments(host):
    """An empty repository attached to the test host."""
    return WaveformSegments(host)


@pytest.fixture
def populated(segments):
    """A repository holding [0, 10), [10, 20) and [5, 15)."""
    segments.add([
        {"start_time": 0, "end_time": 10, "id": "first"},
        {"start_time": 10, "end_time": 20, "id": "second"},
        {"start_time": 5, "end_time": 15, "id": "third"},
    ])
    segments.host.emit.reset_mock()
    return segments
