"""Tests for core bot functionality."""

import asyncio
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import hikari
import pytest

from bot.core.bot import DiscordBot


def make_plugin_module(name, plugin):
    return SimpleNamespace(
        __name__=f"plugins.{name}",
        PLUGIN_METADATA={"name": name, "description": f"{name} plugin"},
        setup=MagicMock(return_value=plugin),
    )


@pytest.fixture
def gateway():
    with patch("bot.core.bot.hikari.GatewayBot") as mock_gateway_cls:
        yield mock_gateway_cls


@pytest.fixture
def discord_bot(gateway, test_settings):
    return DiscordBot(test_settings, plugins={})


class TestDiscordBot:
    """Test DiscordBot core functionality."""

    def test_bot_creation(self, gateway, test_settings):
        """Test creating a DiscordBot instance."""
        bot = DiscordBot(test_settings, plugins={})

        gateway.assert_called_once()
        assert gateway.call_args.kwargs["token"] == "test-token"
        intents = gateway.call_args.kwargs["intents"]
        assert intents & hikari.Intents.GUILD_MESSAGES
        assert intents & hikari.Intents.DM_MESSAGES
        assert intents & hikari.Intents.MESSAGE_CONTENT

        assert bot.hikari_bot == gateway.return_value
        assert bot.message_handler.prefix == "!"
        assert bot.message_handler.default_cooldown == 3.0
        assert bot.plugin_loader.get_available_plugins() == []
        assert bot.is_ready is False

    def test_default_plugin_table(self, gateway, test_settings):
        bot = DiscordBot(test_settings)

        assert bot.plugin_loader.get_available_plugins() == ["general", "help"]

    def test_event_subscriptions(self, discord_bot):
        subscribed = {
            call.args[0]: call.args[1] for call in discord_bot.hikari_bot.subscribe.call_args_list
        }

        assert subscribed[hikari.StartingEvent] == discord_bot.on_starting
        assert subscribed[hikari.ShardReadyEvent] == discord_bot.on_ready
        assert subscribed[hikari.ShardDisconnectedEvent] == discord_bot.on_shard_disconnected
        assert subscribed[hikari.ExceptionEvent] == discord_bot.on_exception
        assert subscribed[hikari.MessageCreateEvent] == discord_bot.on_message_create
        assert subscribed[hikari.StoppingEvent] == discord_bot.on_stopping

    def test_run_method(self, discord_bot):
        """Test bot run method."""
        discord_bot.run()

        discord_bot.hikari_bot.run.assert_called_once()

    def test_run_handles_keyboard_interrupt(self, discord_bot):
        discord_bot.hikari_bot.run.side_effect = KeyboardInterrupt

        discord_bot.run()

    def test_run_reraises_crash(self, discord_bot):
        discord_bot.hikari_bot.run.side_effect = RuntimeError("gateway down")

        with pytest.raises(RuntimeError):
            discord_bot.run()


class TestLifecycle:
    """Test startup, readiness and shutdown handling."""

    @pytest.mark.asyncio
    async def test_on_ready_logs_once(self, discord_bot, caplog):
        event = MagicMock()
        event.my_user = "pod-bot#0001"
        logging.disable(logging.NOTSET)
        try:
            with caplog.at_level(logging.INFO, logger="bot.core.bot"):
                await discord_bot.on_ready(event)
                await discord_bot.on_ready(event)
        finally:
            logging.disable(logging.CRITICAL)

        deployed = [r for r in caplog.records if r.getMessage() == ">> pod-bot deployed -- beep bop"]
        assert len(deployed) == 1
        assert discord_bot.is_ready is True

    @pytest.mark.asyncio
    async def test_on_starting_loads_enabled_plugins(self, gateway, test_settings):
        plugin = MagicMock(on_load=AsyncMock(), on_unload=AsyncMock())
        bot = DiscordBot(
            test_settings.model_copy(update={"enabled_plugins": ["general", "missing"]}),
            plugins={"general": make_plugin_module("general", plugin)},
        )
        loop = asyncio.get_running_loop()
        previous_handler = loop.get_exception_handler()

        try:
            await bot.on_starting(MagicMock())
            assert loop.get_exception_handler() == bot._handle_loop_exception
        finally:
            loop.set_exception_handler(previous_handler)

        plugin.on_load.assert_awaited_once()
        assert bot.plugin_loader.get_loaded_plugins() == ["general"]

    @pytest.mark.asyncio
    async def test_on_stopping_unloads_and_resets(self, gateway, test_settings):
        plugin = MagicMock(on_load=AsyncMock(), on_unload=AsyncMock())
        bot = DiscordBot(
            test_settings.model_copy(update={"enabled_plugins": ["general"]}),
            plugins={"general": make_plugin_module("general", plugin)},
        )
        await bot.plugin_loader.load_all_plugins(["general"])
        bot.cooldowns.reset = MagicMock()

        await bot.on_stopping(MagicMock())

        plugin.on_unload.assert_awaited_once()
        bot.cooldowns.reset.assert_called_once_with()
        assert bot.plugin_loader.get_loaded_plugins() == []

    @pytest.mark.asyncio
    async def test_on_message_create_delegates(self, discord_bot, mock_message_event):
        discord_bot.message_handler.handle_message = AsyncMock(return_value=False)

        await discord_bot.on_message_create(mock_message_event)

        discord_bot.message_handler.handle_message.assert_awaited_once_with(mock_message_event)


class TestErrorReporting:
    """Test that gateway and loop errors are logged, not raised."""

    @pytest.mark.asyncio
    async def test_on_exception_logs(self, discord_bot, caplog):
        error = ValueError("listener failed")
        event = MagicMock()
        event.exception = error
        event.exc_info = (ValueError, error, None)
        event.failed_event = MagicMock(spec=hikari.MessageCreateEvent)
        logging.disable(logging.NOTSET)
        try:
            with caplog.at_level(logging.ERROR, logger="bot.core.bot"):
                await discord_bot.on_exception(event)
        finally:
            logging.disable(logging.CRITICAL)

        assert any("listener failed" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_on_shard_disconnected_logs(self, discord_bot, caplog):
        event = MagicMock()
        event.shard.id = 0
        logging.disable(logging.NOTSET)
        try:
            with caplog.at_level(logging.WARNING, logger="bot.core.bot"):
                await discord_bot.on_shard_disconnected(event)
        finally:
            logging.disable(logging.CRITICAL)

        assert any("shard 0" in r.getMessage() for r in caplog.records)

    def test_loop_exception_handler_logs(self, discord_bot, caplog):
        error = RuntimeError("task exploded")
        logging.disable(logging.NOTSET)
        try:
            with caplog.at_level(logging.ERROR, logger="bot.core.bot"):
                discord_bot._handle_loop_exception(
                    MagicMock(), {"message": "Task exception was never retrieved", "exception": error}
                )
                discord_bot._handle_loop_exception(MagicMock(), {"message": "Future was cancelled"})
        finally:
            logging.disable(logging.CRITICAL)

        messages = [r.getMessage() for r in caplog.records]
        assert "Unhandled asynchronous error: Task exception was never retrieved" in messages
        assert "Unhandled asynchronous error: Future was cancelled" in messages
