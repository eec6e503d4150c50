"""Shared CLI utilities."""

from __future__ import annotations

import json
import re
import tomllib
from pathlib import Path

from reelsync.core.models import Scene
from reelsync.subtitles.text import parse_duration_to_seconds


def _to_seconds(value: object) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return parse_duration_to_seconds(str(value))


def load_scene_plan(path: Path) -> tuple[str, list[Scene]]:
    """Load a scene plan from a JSON or TOML file.

    Accepts either a bare list of scenes or a mapping with ``title`` and
    ``scenes``. Each scene needs ``narration`` and ``duration``; durations
    may be numbers or script strings like "5 seconds".

    Returns:
        Tuple of (title, scenes). Title defaults to the file stem.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Scene file not found: {path}")

    if path.suffix == ".toml":
        with open(path, "rb") as f:
            data = tomllib.load(f)
    else:
        data = json.loads(path.read_text(encoding="utf-8"))

    if isinstance(data, list):
        title, raw_scenes = path.stem, data
    else:
        title, raw_scenes = data.get("title") or path.stem, data.get("scenes", [])

    scenes = []
    for i, raw in enumerate(raw_scenes, 1):
        if "duration" not in raw:
            raise ValueError(f"Scene {i} in {path} has no duration")
        scenes.append(
            Scene(narration=str(raw.get("narration", "")), duration=_to_seconds(raw["duration"]))
        )
    return title, scenes


_CLI_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*(seconds?|minutes?)?\s*$", re.IGNORECASE)


def parse_durations(values: list[str]) -> list[float]:
    """Parse CLI duration arguments ("5", "2.5 seconds", "1 minute").

    Unlike script durations, anything unrecognized is an error.

    Raises:
        ValueError: If a value is not a number, optionally followed by a unit.
    """
    durations = []
    for v in values:
        match = _CLI_DURATION_RE.match(v)
        if not match:
            raise ValueError(f"Invalid duration: {v!r}")
        amount = float(match.group(1))
        unit = (match.group(2) or "").lower()
        durations.append(amount * 60 if unit.startswith("minute") else amount)
    return durations
