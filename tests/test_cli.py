"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from waveformsegments.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def segments_file(tmp_path):
    path = tmp_path / "segments.json"
    path.write_text(json.dumps({
        "segments": [
            {"startTime": 0, "endTime": 10, "labelText": "Intro", "id": "intro"},
            {"startTime": 10, "endTime": 20, "labelText": "Verse", "id": "verse"},
        ]
    }), encoding="utf-8")
    return str(path)


class TestCli:
    """Tests for the waveformsegments command."""

    def test_show(self, runner, segments_file):
        result = runner.invoke(main, ["show", segments_file])
        assert result.exit_code == 0
        assert "Intro" in result.output
        assert "Verse" in result.output

    def test_at_is_half_open(self, runner, segments_file):
        result = runner.invoke(main, ["at", segments_file, "10"])
        assert result.exit_code == 0
        assert "Verse" in result.output
        assert "Intro" not in result.output

    def test_at_no_match(self, runner, segments_file):
        result = runner.invoke(main, ["at", segments_file, "25"])
        assert result.exit_code == 0
        assert "no segments" in result.output

    def test_find(self, runner, segments_file):
        result = runner.invoke(main, ["find", segments_file, "5", "8"])
        assert result.exit_code == 0
        assert "Intro" in result.output
        assert "Verse" not in result.output

    def test_plain_list_file(self, runner, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"start_time": 1, "end_time": 2, "label_text": "Solo"}]), encoding="utf-8")

        result = runner.invoke(main, ["show", str(path)])

        assert result.exit_code == 0
        assert "Solo" in result.output

    def test_duplicate_ids_fail(self, runner, tmp_path):
        path = tmp_path / "dupes.json"
        path.write_text(json.dumps([
            {"start_time": 1, "end_time": 2, "id": "a"},
            {"start_time": 3, "end_time": 4, "id": "a"},
        ]), encoding="utf-8")

        result = runner.invoke(main, ["show", str(path)])

        assert result.exit_code == 1
        assert "Duplicate segment id" in result.output

    def test_invalid_json_fails(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(main, ["show", str(path)])

        assert result.exit_code == 1
        assert "File error" in result.output

    def test_undecodable_file_fails(self, runner, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"start_time": 0, "end_time": 1, "label_text": "\xff"}]')

        result = runner.invoke(main, ["show", str(path)])

        assert result.exit_code == 1
        assert "File error" in result.output

    @pytest.mark.parametrize("color", ["#a]b[/x", "[bold]", "not a color", "#ff0000"])
    def test_color_shown_as_text(self, runner, tmp_path, color):
        path = tmp_path / "colors.json"
        path.write_text(json.dumps([{"start_time": 0, "end_time": 1, "color": color}]), encoding="utf-8")

        result = runner.invoke(main, ["show", str(path)])

        assert result.exit_code == 0
        assert color in result.output

    def test_label_markup_shown_as_text(self, runner, tmp_path):
        path = tmp_path / "label.json"
        path.write_text(json.dumps([{"start_time": 0, "end_time": 1, "label_text": "[/x]"}]), encoding="utf-8")

        result = runner.invoke(main, ["show", str(path)])

        assert result.exit_code == 0
        assert "[/x]" in result.output
