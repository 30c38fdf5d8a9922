import logging
import re
from typing import Any, Awaitable, Callable, List, Optional, Tuple

import hikari

from .command_registry import CommandRegistry
from .cooldowns import CooldownTracker

logger = logging.getLogger(__name__)

CommandCallback = Callable[["PrefixContext", List[str]], Awaitable[Any]]

GUILD_ONLY_REPLY = "I can't execute that command inside DMs!"
EXECUTION_ERROR_REPLY = "there was an error trying to execute that command!"

_ARGUMENT_SEPARATOR = re.compile(r" +")


class PrefixCommand:
    def __init__(
        self,
        name: str,
        callback: CommandCallback,
        description: str = "",
        aliases: Optional[List[str]] = None,
        usage: Optional[str] = None,
        guild_only: bool = False,
        args: bool = False,
        cooldown: Optional[float] = None,
        plugin_name: Optional[str] = None,
    ):
        self.name = name
        self.callback = callback
        self.description = description
        self.aliases = aliases or []
        self.usage = usage
        self.guild_only = guild_only
        self.args = args
        self.cooldown = cooldown
        self.plugin_name = plugin_name


class MessageCommandHandler:
    def __init__(
        self,
        bot: Any,
        registry: CommandRegistry,
        cooldowns: CooldownTracker,
        prefix: str,
        default_cooldown: float = 3.0,
    ):
        self.bot = bot
        self.registry = registry
        self.cooldowns = cooldowns
        self.prefix = prefix
        self.default_cooldown = default_cooldown

    def parse(self, content: Optional[str]) -> Optional[Tuple[str, List[str]]]:
        """Split a prefixed message into a lower-cased command name and its arguments."""
        if not content or not content.startswith(self.prefix):
            return None

        body = content[len(self.prefix):].strip()
        if not body:
            return None

        parts = _ARGUMENT_SEPARATOR.split(body)
        return parts[0].lower(), parts[1:]

    def cooldown_for(self, command: PrefixCommand) -> float:
        return self.default_cooldown if command.cooldown is None else command.cooldown

    async def handle_message(self, event: hikari.MessageCreateEvent) -> bool:
        # Ignore bot messages, this bot's own included
        if event.author.is_bot:
            return False

        parsed = self.parse(event.content)
        if parsed is None:
            return False

        command_name, args = parsed
        command = self.registry.get(command_name)
        if command is None:
            return False

        logger.info(f"Prefix command called: {self.prefix}{command_name} by {event.author.username}")

        ctx = PrefixContext(event, self.bot, args, self.prefix)

        if command.guild_only and ctx.is_dm:
            await ctx.reply(GUILD_ONLY_REPLY)
            return True

        if command.args and not args:
            reply = f"You didn't provide any arguments, {ctx.author.mention}!"
            if command.usage:
                reply += f"\nThe proper usage would be: `{self.prefix}{command.name} {command.usage}`"
            await ctx.respond(reply)
            return True

        cooldown = self.cooldown_for(command)
        time_left = self.cooldowns.remaining(command.name, ctx.author.id, cooldown)
        if time_left is not None:
            await ctx.reply(
                f"please wait {time_left:.1f} more second(s) before reusing the `{command.name}` command."
            )
            return True
        self.cooldowns.touch(command.name, ctx.author.id, cooldown)

        try:
            await command.callback(ctx, args)
        except Exception:
            logger.exception(f"Error executing prefix command {command.name}")
            await ctx.reply(EXECUTION_ERROR_REPLY)

        return True


class PrefixContext:
    def __init__(self, event: hikari.MessageCreateEvent, bot: Any, args: List[str], prefix: str = "!"):
        self.event = event
        self.bot = bot
        self.args = args
        self.prefix = prefix

        self.message = event.message
        self.author = event.author
        self.guild_id = event.message.guild_id
        self.channel_id = event.channel_id

    @property
    def is_dm(self) -> bool:
        return self.guild_id is None

    def get_guild(self) -> Optional[hikari.GatewayGuild]:
        if self.guild_id:
            return self.bot.hikari_bot.cache.get_guild(self.guild_id)
        return None

    def get_command(self, name: str) -> Optional[PrefixCommand]:
        return self.bot.command_registry.get(name)

    async def respond(self, content: str = None, *, embed: hikari.Embed = None) -> None:
        await self.bot.hikari_bot.rest.create_message(
            self.channel_id,
            content=content,
            embed=embed,
        )

    async def reply(self, content: str) -> None:
        """Respond in the channel, addressing the author by mention."""
        await self.respond(f"{self.author.mention}, {content}")

    async def send_dm(self, content: str) -> None:
        channel = await self.bot.hikari_bot.rest.create_dm_channel(self.author.id)
        await self.bot.hikari_bot.rest.create_message(channel.id, content=content)
