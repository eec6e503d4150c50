"""Shared Rich console for diagnostics output."""

from rich.console import Console

console = Console(stderr=True)
