from .bot import DiscordBot
from .command_registry import CommandRegistry
from .cooldowns import CooldownTracker
from .plugin_loader import PluginLoader

__all__ = ["DiscordBot", "CommandRegistry", "CooldownTracker", "PluginLoader"]
