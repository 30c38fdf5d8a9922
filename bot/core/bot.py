import asyncio
import logging
from collections.abc import Mapping
from types import ModuleType
from typing import Any

import hikari

from config.settings import BotSettings

from .command_registry import CommandRegistry
from .cooldowns import CooldownTracker
from .message_handler import MessageCommandHandler
from .plugin_loader import PluginLoader

logger = logging.getLogger(__name__)


class DiscordBot:
    def __init__(self, settings: BotSettings, plugins: Mapping[str, ModuleType] | None = None) -> None:
        self.settings = settings

        # Guild and DM messages, with content for prefix parsing
        intents = hikari.Intents.ALL_MESSAGES | hikari.Intents.GUILDS | hikari.Intents.MESSAGE_CONTENT
        self.hikari_bot = hikari.GatewayBot(token=settings.discord_token, intents=intents)

        if plugins is None:
            from plugins import AVAILABLE_PLUGINS

            plugins = AVAILABLE_PLUGINS

        # Initialize systems
        self.command_registry = CommandRegistry()
        self.cooldowns = CooldownTracker()
        self.message_handler = MessageCommandHandler(
            self,
            self.command_registry,
            self.cooldowns,
            prefix=settings.bot_prefix,
            default_cooldown=settings.default_cooldown,
        )
        self.plugin_loader = PluginLoader(self, plugins)

        # Bot state
        self.is_ready = False

        self._setup_event_listeners()

    def _setup_event_listeners(self) -> None:
        self.hikari_bot.subscribe(hikari.StartingEvent, self.on_starting)
        self.hikari_bot.subscribe(hikari.ShardReadyEvent, self.on_ready)
        self.hikari_bot.subscribe(hikari.ShardDisconnectedEvent, self.on_shard_disconnected)
        self.hikari_bot.subscribe(hikari.ExceptionEvent, self.on_exception)
        self.hikari_bot.subscribe(hikari.MessageCreateEvent, self.on_message_create)
        self.hikari_bot.subscribe(hikari.StoppingEvent, self.on_stopping)

    async def on_starting(self, event: hikari.StartingEvent) -> None:
        logger.info("Bot is starting...")
        asyncio.get_running_loop().set_exception_handler(self._handle_loop_exception)
        await self._load_plugins()

    async def on_ready(self, event: hikari.ShardReadyEvent) -> None:
        if not self.is_ready:
            logger.info(f">> {self.settings.bot_name} deployed -- beep bop")
            logger.info(f"Logged in as {event.my_user}")
            self.is_ready = True

    async def on_shard_disconnected(self, event: hikari.ShardDisconnectedEvent) -> None:
        logger.warning(f"A websocket connection was interrupted (shard {event.shard.id})")

    async def on_exception(self, event: hikari.ExceptionEvent[Any]) -> None:
        logger.error(
            f"Unhandled error in listener for {type(event.failed_event).__name__}: {event.exception}",
            exc_info=event.exc_info,
        )

    async def on_message_create(self, event: hikari.MessageCreateEvent) -> None:
        logger.debug(f"Message received: '{event.content}' from {event.author.username}")
        await self.message_handler.handle_message(event)

    async def on_stopping(self, event: hikari.StoppingEvent) -> None:
        logger.info("Bot is stopping...")
        await self._cleanup()

    def _handle_loop_exception(self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        exception = context.get("exception")
        message = context.get("message", "Unhandled exception in event loop")
        if exception is not None:
            logger.error(f"Unhandled asynchronous error: {message}", exc_info=exception)
        else:
            logger.error(f"Unhandled asynchronous error: {message}")

    async def _load_plugins(self) -> None:
        enabled_plugins = self.settings.enabled_plugins
        available = self.plugin_loader.get_available_plugins()

        unknown = [p for p in enabled_plugins if p not in available]
        if unknown:
            logger.warning(f"Ignoring unknown plugins: {unknown}")

        plugins_to_load = [p for p in enabled_plugins if p in available]
        if plugins_to_load:
            logger.info(f"Loading plugins: {plugins_to_load}")
            await self.plugin_loader.load_all_plugins(plugins_to_load)
        else:
            logger.warning("No valid plugins found to load")

        logger.info(f"{len(self.command_registry)} commands registered")

    async def _cleanup(self) -> None:
        await self.plugin_loader.unload_all_plugins()
        self.cooldowns.reset()
        logger.info("Cleanup completed")

    def run(self) -> None:
        try:
            logger.info("Starting Discord bot...")
            self.hikari_bot.run()
        except KeyboardInterrupt:
            logger.info("Bot stopped by user")
        except Exception as e:
            logger.error(f"Bot crashed: {e}")
            raise
