"""Narration text preparation for subtitle display and FFmpeg drawtext."""

from __future__ import annotations

import math
import re

_DEFAULT_SCENE_SECONDS = 5.0
_BASE_FONT_SIZE = 32

# Characters that break drawtext quoting, mapped to look-alike safe forms.
_UNICODE_REPLACEMENTS = [
    ("'", "’"),
    ("‘", "’"),
    ("`", "’"),
    ('"', "”"),
    ("“", "”"),
    ("–", "—"),
    ("…", "..."),
    ("©", "(c)"),
    ("®", "(R)"),
    ("™", "(TM)"),
]

# Filter-graph metacharacters, escaped after the backslash itself.
_FILTER_SPECIALS = ":[],;=%"


def parse_duration_to_seconds(duration: str) -> float:
    """Parse a script duration such as "5 seconds", "1 minute" or "2.5".

    Unparsable input falls back to 5 seconds.
    """
    text = duration.lower().strip()
    digits = re.sub(r"[^0-9.]", "", text)

    if "minute" in text or "second" in text:
        try:
            value = float(digits)
        except ValueError:
            return _DEFAULT_SCENE_SECONDS
        return value * 60 if "minute" in text else value

    try:
        value = float(text)
    except ValueError:
        return _DEFAULT_SCENE_SECONDS
    return value if math.isfinite(value) else _DEFAULT_SCENE_SECONDS


def max_line_length_for(
    max_line_length: int = 60,
    font_size: int = _BASE_FONT_SIZE,
    portrait: bool = False,
) -> int:
    """Characters per line for a font size and orientation, clamped to 15-80."""
    ratio = font_size / _BASE_FONT_SIZE
    if font_size >= 48:
        length = math.floor(max_line_length / (ratio * 1.1))
    else:
        length = math.floor(max_line_length / math.sqrt(ratio))
    if portrait:
        length = math.floor(length * 0.7)
    return max(15, min(length, 80))


def max_lines_for(font_size: int = _BASE_FONT_SIZE, portrait: bool = False) -> int:
    if font_size >= 64:
        return 5 if portrait else 4
    if font_size >= 48:
        return 4 if portrait else 3
    return 3 if portrait else 2


def wrap_narration_text(
    text: str,
    max_line_length: int = 60,
    width: int = 1920,
    height: int = 1080,
    font_size: int = _BASE_FONT_SIZE,
) -> str:
    """Wrap narration into subtitle lines without altering the words.

    Line length shrinks for larger fonts and portrait frames. When the text
    needs more lines than allowed, the overflow is folded into the last line
    as long as it stays within 120% of the line length; words beyond that
    are dropped.
    """
    clean = text.strip()
    portrait = width / height < 1
    limit = max_line_length_for(max_line_length, font_size, portrait)

    if len(clean) <= limit:
        return clean

    lines: list[str] = []
    current = ""
    for word in clean.split(" "):
        if len(f"{current} {word}") <= limit:
            current = f"{current} {word}" if current else word
        elif current:
            lines.append(current)
            current = word
        else:
            lines.append(word)
    if current:
        lines.append(current)

    max_lines = max_lines_for(font_size, portrait)
    if len(lines) <= max_lines:
        return "\n".join(lines)

    kept = lines[: max_lines - 1]
    overflow = lines[max_lines - 1 :]
    last = overflow[0]
    for extra in overflow[1:]:
        combined = f"{last} {extra}"
        if len(combined) > limit * 1.2:
            break
        last = combined
    kept.append(last)
    return "\n".join(kept)


def escape_drawtext(text: str) -> str:
    """Make text safe to embed in a single-quoted drawtext ``text=`` value."""
    processed = text.strip()
    for old, new in _UNICODE_REPLACEMENTS:
        processed = processed.replace(old, new)

    processed = processed.replace("\\", "\\\\")
    for char in _FILTER_SPECIALS:
        processed = processed.replace(char, f"\\{char}")

    processed = re.sub(r"\r?\n", "\n", processed)
    return re.sub(r"[ \t]+", " ", processed)
