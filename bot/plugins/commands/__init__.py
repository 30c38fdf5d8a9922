"""Command system for bot plugins."""

from .decorators import command
from .registry import PluginCommandRegistry

__all__ = ["command", "PluginCommandRegistry"]
