"""reelsync: scene timing and subtitle synchronization for narrated videos."""

__version__ = "0.1.0"
