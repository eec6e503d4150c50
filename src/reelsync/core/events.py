"""Build event system for streaming progress to external consumers.

Consumers (CLI progress output, web handlers) register a callback to receive
updates without the build logic knowing who is listening.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass
class PipelineEvent:
    """A progress event emitted while building subtitles.

    Attributes:
        stage: Build stage name (timing, subtitles, filters, save).
        progress: Progress within this stage, 0.0 to 1.0.
        message: Human-readable status message.
        data: Optional payload (e.g. file paths, total duration).
    """

    stage: str
    progress: float
    message: str
    data: dict | None = field(default=None)


EventCallback = Callable[[PipelineEvent], None]
