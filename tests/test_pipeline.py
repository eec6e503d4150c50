"""Tests for the subtitle build orchestrator."""

import json

from reelsync.cli.utils import load_scene_plan
from reelsync.core.config import load_config
from reelsync.core.events import PipelineEvent
from reelsync.core.pipeline import build_subtitles
from reelsync.subtitles.srt import load_subtitles


def test_build_writes_workspace(tmp_path, sample_scenes):
    title, scenes = load_scene_plan(sample_scenes)
    config = load_config(workspace_dir=tmp_path)

    plan = build_subtitles(scenes, config, title=title)

    assert plan.workspace.parent.name == "how-tides-work"
    assert plan.total_duration == 12.5
    assert len(plan.timings) == 3

    srt_path = plan.subtitle_paths["srt"]
    assert srt_path == plan.workspace / "subtitles.srt"
    content = srt_path.read_text(encoding="utf-8")
    assert "2\n00:00:04,000 --> 00:00:07,000\n" in content

    filters = json.loads((plan.workspace / "filters.json").read_text())
    assert [f["scene"] for f in filters] == [1, 2, 3]
    assert filters[0]["adelay"] == "adelay=0|0"
    assert filters[0]["drawtext"].startswith("drawtext=")

    meta = json.loads((plan.workspace / "metadata.json").read_text())
    assert meta["title"] == "How Tides Work"
    assert meta["scene_count"] == 3
    assert meta["scene_durations"] == [4.0, 3.0, 5.5]
    assert meta["files"]["subtitles.srt"]["type"] == "subtitle"
    assert meta["files"]["filters.json"]["type"] == "ffmpeg_filters"


def test_build_with_transitions_and_multiple_formats(tmp_path, sample_scenes):
    _, scenes = load_scene_plan(sample_scenes)
    config = load_config(
        **{
            "workspace_dir": tmp_path,
            "timing.has_transitions": True,
            "timing.transition_duration": 1.0,
            "subtitles.formats": ["srt", "vtt"],
        }
    )

    plan = build_subtitles(scenes, config, title="tides")

    # Every scene is padded by two transitions
    assert plan.total_duration == 12.5 + 3 * 2
    assert set(plan.subtitle_paths) == {"srt", "vtt"}
    vtt = load_subtitles(plan.subtitle_paths["vtt"])
    assert vtt[1].global_start == 6.0 + 2.0 - 0.5
    assert plan.filters[1].audio_delay == "adelay=2000|2000"


def test_build_emits_events_in_order(tmp_path, sample_scenes):
    _, scenes = load_scene_plan(sample_scenes)
    events: list[PipelineEvent] = []

    plan = build_subtitles(scenes, load_config(workspace_dir=tmp_path), on_event=events.append)

    stages = [e.stage for e in events]
    assert stages[0] == "timing"
    assert stages[-1] == "save"
    assert stages.index("subtitles") < stages.index("filters") < stages.index("save")
    assert events[-1].progress == 1.0
    assert events[-1].data == {"workspace": str(plan.workspace)}


def test_build_with_subtitles_disabled(tmp_path, sample_scenes):
    _, scenes = load_scene_plan(sample_scenes)
    config = load_config(**{"workspace_dir": tmp_path, "subtitles.enabled": False})

    plan = build_subtitles(scenes, config)

    assert plan.subtitle_paths == {}
    assert not (plan.workspace / "subtitles.srt").exists()
    assert all(f.drawtext == "" for f in plan.filters)


def test_build_empty_plan(tmp_path):
    plan = build_subtitles([], load_config(workspace_dir=tmp_path), title="empty")
    assert plan.timings == []
    assert plan.total_duration == 0.0
    assert plan.subtitle_paths["srt"].read_text(encoding="utf-8") == ""
