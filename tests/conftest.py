"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from bot.core.command_registry import CommandRegistry
from bot.core.cooldowns import CooldownTracker
from bot.core.message_handler import MessageCommandHandler
from config.settings import BotSettings

# Disable logging during tests
logging.disable(logging.CRITICAL)


class FakeClock:
    """Manually advanced clock for cooldown tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def test_settings():
    """Settings isolated from the developer's environment files."""
    return BotSettings(
        discord_token="test-token",
        bot_prefix="!",
        default_cooldown=3.0,
        _env_file=None,
    )


@pytest.fixture
def mock_hikari_bot():
    """Mock Hikari bot instance."""
    bot = MagicMock(spec=hikari.GatewayBot)
    bot.cache = MagicMock()
    bot.rest = MagicMock()

    bot.rest.create_message = AsyncMock()
    bot.rest.create_dm_channel = AsyncMock(return_value=MagicMock(id=555555555))
    bot.rest.fetch_guild = AsyncMock()
    bot.cache.get_guild = MagicMock(return_value=None)

    return bot


@pytest.fixture
def mock_bot(mock_hikari_bot, test_settings, clock):
    """Mock bot with real command registry, cooldowns and dispatcher."""
    bot = MagicMock()
    bot.settings = test_settings
    bot.hikari_bot = mock_hikari_bot
    bot.command_registry = CommandRegistry()
    bot.cooldowns = CooldownTracker(clock=clock)
    bot.message_handler = MessageCommandHandler(
        bot,
        bot.command_registry,
        bot.cooldowns,
        prefix=test_settings.bot_prefix,
        default_cooldown=test_settings.default_cooldown,
    )
    return bot


@pytest.fixture
def mock_guild():
    """Mock Discord guild."""
    guild = MagicMock(spec=hikari.GatewayGuild)
    guild.id = 123456789
    guild.name = "Test Guild"
    guild.member_count = 100
    return guild


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock(spec=hikari.User)
    user.id = 111111111
    user.username = "testuser"
    user.is_bot = False
    user.mention = "<@111111111>"
    user.display_avatar_url = "https://example.com/avatar.png"
    return user


@pytest.fixture
def mock_message_event(mock_user, mock_guild):
    """Mock message create event from a guild channel."""
    event = MagicMock(spec=hikari.MessageCreateEvent)
    event.author = mock_user
    event.channel_id = 444444444
    event.content = "!test command"
    event.message = MagicMock()
    event.message.guild_id = mock_guild.id
    event.message.user_mentions = {}
    return event


@pytest.fixture
def mock_dm_event(mock_message_event):
    """Mock message create event from a direct message."""
    mock_message_event.message.guild_id = None
    return mock_message_event


@pytest.fixture
def mock_context(mock_user, mock_guild, mock_bot):
    """Mock command context."""
    ctx = MagicMock()
    ctx.author = mock_user
    ctx.guild_id = mock_guild.id
    ctx.channel_id = 444444444
    ctx.is_dm = False
    ctx.bot = mock_bot
    ctx.prefix = "!"
    ctx.message = MagicMock()
    ctx.message.user_mentions = {}
    ctx.get_guild = MagicMock(return_value=mock_guild)
    ctx.get_command = MagicMock(side_effect=mock_bot.command_registry.get)
    ctx.respond = AsyncMock()
    ctx.reply = AsyncMock()
    ctx.send_dm = AsyncMock()
    return ctx
