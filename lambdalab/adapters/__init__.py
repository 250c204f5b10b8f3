"""
Adapters for component ports.
"""

from .console import RecordingConsole, StdoutConsole

__all__ = [
    "RecordingConsole",
    "StdoutConsole",
]
