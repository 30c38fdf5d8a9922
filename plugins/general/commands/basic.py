from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from bot.plugins.commands import command

if TYPE_CHECKING:
    from bot.core.message_handler import PrefixContext

    from ..plugin import GeneralPlugin

logger = logging.getLogger(__name__)


def setup_basic_commands(plugin: GeneralPlugin) -> list[Callable[..., Any]]:
    """Register the simple call-and-response commands."""

    @command(name="ping", description="Ping!")
    async def ping_command(ctx: PrefixContext, args: list[str]) -> None:
        await ctx.respond("Pong.")

    @command(name="beep", description="Beep!")
    async def beep_command(ctx: PrefixContext, args: list[str]) -> None:
        await ctx.respond("Boop.")

    @command(
        name="args",
        description="Returns number of arguments and list of arguments",
        args=True,
    )
    async def args_command(ctx: PrefixContext, args: list[str]) -> None:
        await ctx.respond(f"Arguments ({len(args)}): {', '.join(args)}")

    return [ping_command, beep_command, args_command]
