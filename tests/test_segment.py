"""Tests for the Segment model."""

import pytest

from waveformsegments.exceptions import ValidationError
from waveformsegments.models.segment import Segment


def make_segment(**kwargs):
    options = {"id": "seg", "start_time": 2.0, "end_time": 5.0}
    options.update(kwargs)
    return Segment(**options)


class TestSegment:
    """Tests for the Segment dataclass."""

    def test_defaults(self):
        segment = make_segment()
        assert segment.editable is False
        assert segment.color is None
        assert segment.label_text == ""
        assert segment.data == {}

    def test_duration(self):
        assert make_segment().duration == pytest.approx(3.0)

    def test_zero_length_allowed(self):
        segment = make_segment(start_time=4, end_time=4)
        assert segment.duration == 0

    @pytest.mark.parametrize(
        "start_time, end_time",
        [(-1, 5), (5, 4), ("0", 5), (0, None), (True, 5), (float("nan"), 5)],
    )
    def test_invalid_times(self, start_time, end_time):
        with pytest.raises(ValidationError):
            make_segment(start_time=start_time, end_time=end_time)

    def test_identity_equality(self):
        a = make_segment()
        b = make_segment()
        assert a == a
        assert a != b
        assert len({a, b}) == 2

    def test_id_is_immutable(self):
        segment = make_segment()
        with pytest.raises(AttributeError):
            segment.id = "other"
        assert segment.id == "seg"

    def test_other_fields_are_mutable(self):
        segment = make_segment()
        segment.label_text = "Chorus"
        segment.end_time = 6.0
        assert segment.label_text == "Chorus"
        assert segment.duration == pytest.approx(4.0)

    @pytest.mark.parametrize(
        "name, value",
        [("end_time", -1), ("end_time", 1.0), ("start_time", 6.0), ("start_time", -0.5), ("start_time", "2")],
    )
    def test_time_assignment_validated(self, name, value):
        segment = make_segment()
        with pytest.raises(ValidationError):
            setattr(segment, name, value)
        assert (segment.start_time, segment.end_time) == (2.0, 5.0)

    def test_set_times(self):
        segment = make_segment()
        segment.set_times(8.0, 9.5)
        assert (segment.start_time, segment.end_time) == (8.0, 9.5)

    def test_set_times_invalid(self):
        segment = make_segment()
        with pytest.raises(ValidationError):
            segment.set_times(9.0, 8.0)
        assert (segment.start_time, segment.end_time) == (2.0, 5.0)

    @pytest.mark.parametrize(
        "start_time, end_time, expected",
        [
            (0, 2, False),    # ends where the segment starts
            (0, 2.5, True),
            (3, 4, True),     # inside
            (1, 10, True),    # covers
            (4.5, 8, True),
            (5, 8, False),    # starts where the segment ends
        ],
    )
    def test_is_visible(self, start_time, end_time, expected):
        assert make_segment().is_visible(start_time, end_time) is expected

    def test_to_dict(self):
        segment = make_segment(color="#fff", label_text="Intro", data={"speaker": "A"})
        assert segment.to_dict() == {
            "id": "seg",
            "start_time": 2.0,
            "end_time": 5.0,
            "editable": False,
            "color": "#fff",
            "label_text": "Intro",
            "speaker": "A",
        }
