"""CLI command modules."""

from .audio import AudioCommands
from .utils import UtilityCommands

__all__ = ["AudioCommands", "UtilityCommands"]
