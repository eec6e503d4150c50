"""Configuration system for reelsync.

Layered config loading (lowest to highest priority):
1. config/default.toml (shipped with package)
2. ~/.config/reelsync/config.toml (user-level)
3. ./reelsync.toml (project-level)
4. Environment variables (REELSYNC_TIMING__TRANSITION_DURATION, etc.)
5. CLI flags
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

from reelsync.core.models import TimingSettings

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_DEFAULT_CONFIG = _PACKAGE_ROOT / "config" / "default.toml"
_USER_CONFIG = Path.home() / ".config" / "reelsync" / "config.toml"
_PROJECT_CONFIG = Path("reelsync.toml")


class TimingConfig(BaseModel):
    has_transitions: bool = False
    transition_duration: float = Field(default=1.0, ge=0)
    subtitle_delay: float = Field(default=0.0, ge=0)
    subtitle_early_start: float = Field(default=0.5, ge=0)

    def to_settings(self) -> TimingSettings:
        """Build the immutable settings record the calculator consumes."""
        return TimingSettings(
            has_transitions=self.has_transitions,
            transition_duration=self.transition_duration,
            subtitle_delay=self.subtitle_delay,
            subtitle_early_start=self.subtitle_early_start,
        )


class SubtitleConfig(BaseModel):
    enabled: bool = True
    position: Literal["bottom", "top", "center"] = "bottom"
    fade_in: bool = True
    fade_in_duration: float = Field(default=0.5, gt=0)
    font_size: int = Field(default=32, ge=12, le=72)
    font_color: str = "ffffff"
    outline_color: str = "000000"
    outline_width: int = Field(default=2, ge=0)
    font_name: str = "Arial"
    font_file: str = "/System/Library/Fonts/Arial.ttf"
    max_line_length: int = 60
    formats: list[Literal["srt", "vtt", "ass"]] = ["srt"]


class VideoConfig(BaseModel):
    width: int = Field(default=1920, gt=0)
    height: int = Field(default=1080, gt=0)
    orientation: Literal["auto", "landscape", "portrait", "square"] = "auto"

    @property
    def is_portrait(self) -> bool:
        """Explicit orientation wins; "auto" falls back to the aspect ratio."""
        if self.orientation == "auto":
            return self.width / self.height < 1
        return self.orientation == "portrait"


class ReelSyncConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REELSYNC_",
        env_nested_delimiter="__",
    )

    timing: TimingConfig = TimingConfig()
    subtitles: SubtitleConfig = SubtitleConfig()
    video: VideoConfig = VideoConfig()
    workspace_dir: Path = Path("./reelsync_workspace")


def _load_toml(path: Path) -> dict:
    """Load a TOML file if it exists, return empty dict otherwise."""
    if path.is_file():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(**cli_overrides: object) -> ReelSyncConfig:
    """Load configuration from all layers and merge.

    Args:
        **cli_overrides: Direct overrides from CLI flags. Keys can be
            dot-separated (e.g. timing.transition_duration=0.5).
    """
    config_data: dict = {}
    for path in (_DEFAULT_CONFIG, _USER_CONFIG, _PROJECT_CONFIG):
        layer = _load_toml(path)
        config_data = _deep_merge(config_data, layer)

    # Flatten 'general' section into top-level
    if "general" in config_data:
        general = config_data.pop("general")
        config_data = _deep_merge(config_data, general)

    # Layer 4: env vars, above the TOML files and below CLI flags
    config_data = _deep_merge(config_data, EnvSettingsSource(ReelSyncConfig)())

    for key, value in cli_overrides.items():
        if value is None:
            continue
        parts = key.split(".")
        target = config_data
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = value

    return ReelSyncConfig(**config_data)
