"""Workspace directory management for per-video output."""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path


def slugify(text: str) -> str:
    """Convert text to a filesystem-safe slug."""
    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"-+", "-", text)
    return text[:80].strip("-")


def create_workspace(
    title: str,
    base_dir: Path = Path("./reelsync_workspace"),
) -> Path:
    """Create a timestamped workspace directory for a video.

    Structure: <base_dir>/<slug>/<YYYYMMDD_HHMMSS>/
    """
    slug = slugify(title) or "untitled"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    workspace = Path(base_dir) / slug / timestamp
    workspace.mkdir(parents=True, exist_ok=True)
    return workspace


def workspace_paths(workspace: Path, formats: list[str] | None = None) -> dict:
    """Standard output paths for a workspace.

    Returns a dict with keys: metadata, filters, and subtitles_<fmt> per format.
    """
    paths = {
        "metadata": workspace / "metadata.json",
        "filters": workspace / "filters.json",
    }
    for fmt in formats or ["srt"]:
        paths[f"subtitles_{fmt}"] = workspace / f"subtitles.{fmt}"
    return paths


def save_metadata(workspace: Path, **kwargs: object) -> Path:
    """Write metadata.json with a file inventory and build parameters."""
    meta_path = workspace / "metadata.json"

    files = {}
    for f in sorted(workspace.iterdir()):
        if f.name == "metadata.json" or f.name.startswith("."):
            continue
        files[f.name] = {
            "size_bytes": f.stat().st_size,
            "type": _classify_file(f.name),
        }

    data = {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "files": files,
    }
    data.update({k: str(v) if isinstance(v, Path) else v for k, v in kwargs.items()})

    meta_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return meta_path


def _classify_file(name: str) -> str:
    if name.startswith("subtitles") and name.endswith((".srt", ".vtt", ".ass")):
        return "subtitle"
    if name == "filters.json":
        return "ffmpeg_filters"
    return "other"
