"""Built-in plugins, registered explicitly by name."""

from . import general, help

AVAILABLE_PLUGINS = {
    "general": general,
    "help": help,
}

__all__ = ["AVAILABLE_PLUGINS"]
