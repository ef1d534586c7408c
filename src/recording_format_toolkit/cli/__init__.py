"""CLI module for the recording format toolkit."""

from .commands import AudioCommands, UtilityCommands
from .main import FormatToolkitCLI

__all__ = [
    "AudioCommands",
    "FormatToolkitCLI",
    "UtilityCommands",
]
