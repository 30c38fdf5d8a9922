"""Command registration for plugins."""

import inspect
import logging
from typing import Any

from ...core.message_handler import PrefixCommand

logger = logging.getLogger(__name__)


class PluginCommandRegistry:
    """Collects a plugin's decorated commands and registers them with the bot."""

    def __init__(self, plugin: Any):
        self.plugin = plugin
        self.bot = plugin.bot
        self.logger = logging.getLogger(f"registry.{plugin.name}")
        self._commands: list[PrefixCommand] = []

    def collect(self) -> list[PrefixCommand]:
        """Build prefix commands from every decorated attribute of the plugin."""
        collected = []
        for attr_name in dir(self.plugin):
            attr = getattr(self.plugin, attr_name)

            if not inspect.iscoroutinefunction(attr) or not hasattr(attr, "_prefix_command"):
                continue

            meta = attr._prefix_command
            collected.append(
                PrefixCommand(
                    name=meta["name"],
                    callback=attr,
                    description=meta.get("description", ""),
                    aliases=meta.get("aliases", []),
                    usage=meta.get("usage"),
                    guild_only=meta.get("guild_only", False),
                    args=meta.get("args", False),
                    cooldown=meta.get("cooldown"),
                    plugin_name=self.plugin.name,
                )
            )
        return collected

    async def register_commands(self) -> None:
        """Register all commands found in the plugin."""
        for prefix_cmd in self.collect():
            self.bot.command_registry.add_command(prefix_cmd)
            self._commands.append(prefix_cmd)
            self.logger.info(f"Registered prefix command: {prefix_cmd.name} from plugin {self.plugin.name}")

    async def unregister_commands(self) -> None:
        """Unregister all commands."""
        for prefix_cmd in self._commands:
            self.bot.command_registry.remove_command(prefix_cmd.name)
            self.logger.debug(f"Removed prefix command: {prefix_cmd.name}")

        self._commands.clear()

    @property
    def commands(self) -> list[PrefixCommand]:
        return list(self._commands)
