"""Line-based input layer for structured XML reading."""

from .delegate import StreamDelegate

__all__ = [
    "StreamDelegate",
]
