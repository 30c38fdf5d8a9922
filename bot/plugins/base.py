from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.bot import DiscordBot
    from ..core.message_handler import PrefixCommand

logger = logging.getLogger(__name__)


class BasePlugin:
    def __init__(self, bot: DiscordBot) -> None:
        self.bot = bot
        self.name = self.__class__.__name__.lower().replace("plugin", "")
        self.logger = logging.getLogger(f"plugin.{self.name}")
        # Import PluginCommandRegistry here to avoid circular import
        from .commands import PluginCommandRegistry

        self._command_registry: PluginCommandRegistry = PluginCommandRegistry(self)
        self.settings = bot.settings
        self.gateway = bot.hikari_bot
        self.rest = bot.hikari_bot.rest
        self.cache = bot.hikari_bot.cache

    async def on_load(self) -> None:
        await self._command_registry.register_commands()
        self.logger.info(f"Plugin {self.name} loaded successfully")

    async def on_unload(self) -> None:
        await self._command_registry.unregister_commands()
        self.logger.info(f"Plugin {self.name} unloaded successfully")

    @property
    def commands(self) -> list[PrefixCommand]:
        """Commands this plugin has registered."""
        return self._command_registry.commands

    @property
    def prefix(self) -> str:
        return self.settings.bot_prefix

    def format_command(self, name: str, usage: str | None = None) -> str:
        """Render an invocation such as ``!help [command name]``."""
        if usage:
            return f"{self.prefix}{name} {usage}"
        return f"{self.prefix}{name}"

