"""Simple module-level reading functions."""

from .reader import read, read_file, read_string

__all__ = [
    "read",
    "read_file",
    "read_string",
]
