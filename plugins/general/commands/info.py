from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from bot.plugins.commands import command

if TYPE_CHECKING:
    from bot.core.message_handler import PrefixContext

    from ..plugin import GeneralPlugin

logger = logging.getLogger(__name__)


def setup_info_commands(plugin: GeneralPlugin) -> list[Callable[..., Any]]:
    """Register commands that describe the server and its users."""

    @command(name="server", description="Display info about this server.", guild_only=True)
    async def server_command(ctx: PrefixContext, args: list[str]) -> None:
        guild = ctx.get_guild()
        if guild is not None:
            name, member_count = guild.name, guild.member_count
        else:
            # Not cached yet; the REST guild only carries an approximate count
            logger.debug(f"Guild {ctx.guild_id} not cached, fetching it")
            rest_guild = await plugin.rest.fetch_guild(ctx.guild_id)
            name, member_count = rest_guild.name, rest_guild.approximate_member_count

        await ctx.respond(f"Server name: {name}\nTotal members: {member_count}")

    @command(name="user-info", description="Display info about yourself.")
    async def user_info_command(ctx: PrefixContext, args: list[str]) -> None:
        await ctx.respond(f"Your username: {ctx.author.username}\nYour ID: {ctx.author.id}")

    @command(
        name="avatar",
        description="Get the avatar URL of the tagged user(s), or your own avatar.",
        aliases=["icon", "pfp"],
        usage="[@user ...]",
    )
    async def avatar_command(ctx: PrefixContext, args: list[str]) -> None:
        mentioned = list(ctx.message.user_mentions.values())
        if not mentioned:
            await ctx.respond(f"Your avatar: <{ctx.author.display_avatar_url}>")
            return

        lines = [f"{user.username}'s avatar: <{user.display_avatar_url}>" for user in mentioned]
        await ctx.respond("\n".join(lines))

    return [server_command, user_info_command, avatar_command]
