"""Tests for CLI utility functions: scene plan loading."""

import json

import pytest

from reelsync.cli.utils import load_scene_plan, parse_durations


class TestLoadScenePlan:
    def test_fixture(self, sample_scenes):
        title, scenes = load_scene_plan(sample_scenes)
        assert title == "How Tides Work"
        assert [s.duration for s in scenes] == [4.0, 3.0, 5.5]
        assert scenes[0].narration.startswith("The moon")

    def test_bare_list_uses_file_stem(self, tmp_path):
        path = tmp_path / "my-plan.json"
        path.write_text(json.dumps([{"narration": "Hi", "duration": "1 minute"}]))
        title, scenes = load_scene_plan(path)
        assert title == "my-plan"
        assert scenes[0].duration == 60.0

    def test_missing_narration_is_empty(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"scenes": [{"duration": 2}]}))
        _, scenes = load_scene_plan(path)
        assert scenes[0].narration == ""

    def test_missing_duration(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"scenes": [{"narration": "x"}]}))
        with pytest.raises(ValueError, match="Scene 1"):
            load_scene_plan(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene_plan(tmp_path / "absent.json")


def test_parse_durations():
    assert parse_durations(["5", "2.5 seconds", "1 minute"]) == [5.0, 2.5, 60.0]


@pytest.mark.parametrize("value", ["3x", "five", "", "2 hours", "-1"])
def test_parse_durations_rejects_unrecognized(value):
    with pytest.raises(ValueError, match="Invalid duration"):
        parse_durations(["4", value])
