"""FFmpeg filter arguments derived from scene timing.

Builds filter strings only; running FFmpeg is the caller's concern.
"""

from __future__ import annotations

import math
from pathlib import Path

from reelsync.core.config import SubtitleConfig, VideoConfig
from reelsync.core.models import SceneTimingInfo
from reelsync.subtitles.text import escape_drawtext, wrap_narration_text
from reelsync.timing.calculator import audio_delay_for_scene, subtitle_window_for_scene

# libass alignment codes (numpad layout)
_ALIGNMENT = {"bottom": 2, "top": 8, "center": 5}


def _num(value: float) -> str:
    """Compact decimal for filter expressions (millisecond precision)."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def _hex_color(color: str) -> str:
    return color.lstrip("#").rjust(6, "0")


def audio_delay_filter(timing: SceneTimingInfo) -> str:
    """``adelay`` filter that shifts both stereo channels to the audio start."""
    ms = round(audio_delay_for_scene(timing) * 1000)
    return f"adelay={ms}|{ms}"


def subtitles_filter(srt_path: Path, style: SubtitleConfig) -> str:
    """``subtitles`` filter that burns an SRT file with a forced style."""
    force_style = ",".join(
        [
            f"FontName={style.font_name}",
            f"FontSize={style.font_size}",
            f"PrimaryColour=&H{_hex_color(style.font_color)}&",
            f"OutlineColour=&H{_hex_color(style.outline_color)}&",
            f"Outline={style.outline_width}",
            f"Alignment={_ALIGNMENT.get(style.position, 2)}",
        ]
    )
    return f"subtitles={srt_path}:force_style='{force_style}'"


def drawtext_filter(
    text: str,
    timing: SceneTimingInfo,
    style: SubtitleConfig,
    video: VideoConfig | None = None,
) -> str:
    """``drawtext`` filter showing one scene's narration during its subtitle window.

    Returns an empty string when subtitles are disabled or the text is blank.
    Times are scene-relative, matching a per-scene render before concatenation.
    """
    if not style.enabled or not text.strip():
        return ""

    video = video or VideoConfig()
    portrait = video.is_portrait

    wrapped = wrap_narration_text(
        text,
        max_line_length=style.max_line_length,
        width=video.width,
        height=video.height,
        font_size=style.font_size,
    )
    escaped = escape_drawtext(wrapped)

    font_size = style.font_size
    if portrait:
        font_size = max(16, math.floor(style.font_size * 0.85))

    h_margin = max(20, math.floor(video.width * 0.05))
    v_margin = max(30, math.floor(video.height * 0.08))
    if portrait:
        v_margin = max(50, math.floor(video.height * 0.12))

    x = f"max({h_margin}\\,min((w-text_w)/2\\,w-text_w-{h_margin}))"
    if style.position == "top":
        y = f"{v_margin}"
    elif style.position == "center":
        y = f"max({v_margin}\\,min((h-text_h)/2\\,h-text_h-{v_margin}))"
    else:
        y = f"max({v_margin}\\,h-text_h-{v_margin})"

    window = subtitle_window_for_scene(timing)
    start = _num(window.start_time)
    end = _num(window.end_time)

    parts = [
        f"drawtext=text='{escaped}'",
        f"fontsize={font_size}",
        f"fontcolor={style.font_color.lstrip('#')}",
        f"x={x}",
        f"y={y}",
        f"borderw={style.outline_width}",
        f"bordercolor={style.outline_color.lstrip('#')}",
        f"fontfile={style.font_file}",
        "text_align=center",
        f"enable=between(t\\,{start}\\,{end})",
    ]
    if style.fade_in:
        fade = _num(style.fade_in_duration)
        fade_end = _num(window.start_time + style.fade_in_duration)
        parts.append(
            f"alpha=if(lt(t\\,{start})\\,0\\,if(lt(t\\,{fade_end})\\,(t-{start})/{fade}\\,1))"
        )
    return ":".join(parts)
