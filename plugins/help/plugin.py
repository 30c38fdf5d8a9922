import logging

import hikari

from bot.core.message_handler import PrefixCommand, PrefixContext
from bot.plugins.base import BasePlugin
from bot.plugins.commands import command

logger = logging.getLogger(__name__)

DM_SENT_REPLY = "I've sent you a DM with all my commands!"
DM_FAILED_REPLY = "it seems like I can't DM you! Do you have DMs disabled?"
INVALID_COMMAND_REPLY = "that's not a valid command!"


class HelpPlugin(BasePlugin):
    @command(
        name="help",
        description="List all of my commands or info about a specific command.",
        aliases=["commands"],
        usage="[command name]",
        cooldown=5,
    )
    async def help_command(self, ctx: PrefixContext, args: list[str]) -> None:
        if not args:
            await self._send_command_list(ctx)
            return

        cmd = ctx.get_command(args[0])
        if cmd is None:
            await ctx.reply(INVALID_COMMAND_REPLY)
            return

        await ctx.respond(self.describe_command(cmd))

    async def _send_command_list(self, ctx: PrefixContext) -> None:
        try:
            await ctx.send_dm(self.command_list())
        except hikari.ForbiddenError as e:
            self.logger.error(f"Could not send help DM to {ctx.author.username}: {e}")
            await ctx.reply(DM_FAILED_REPLY)
            return

        if not ctx.is_dm:
            await ctx.reply(DM_SENT_REPLY)

    def command_list(self) -> str:
        names = ", ".join(cmd.name for cmd in self.bot.command_registry.get_all())
        return (
            "Here's a list of all my commands:\n"
            f"{names}\n"
            f"\nYou can send `{self.format_command('help', '[command name]')}` "
            "to get info on a specific command!"
        )

    def describe_command(self, cmd: PrefixCommand) -> str:
        lines = [f"**Name:** {cmd.name}"]

        if cmd.aliases:
            lines.append(f"**Aliases:** {', '.join(cmd.aliases)}")
        if cmd.description:
            lines.append(f"**Description:** {cmd.description}")
        if cmd.usage:
            lines.append(f"**Usage:** {self.format_command(cmd.name, cmd.usage)}")
        if cmd.guild_only:
            lines.append("**Server only:** yes")

        cooldown = self.bot.message_handler.cooldown_for(cmd)
        lines.append(f"**Cooldown:** {cooldown:g} second(s)")

        return "\n".join(lines)
