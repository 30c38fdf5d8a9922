"""Command decorator for declaring prefix commands."""

import inspect


def command(
    name: str,
    description: str = "",
    aliases: list[str] | None = None,
    usage: str | None = None,
    guild_only: bool = False,
    args: bool = False,
    cooldown: float | None = None,
):
    """
    Mark a coroutine ``(ctx, args)`` as a prefix command.

    The metadata is stored on the function and picked up when the owning plugin
    registers its commands. ``cooldown`` is in seconds; ``None`` uses the bot's
    default, ``0`` disables it.
    """
    if cooldown is not None and cooldown < 0:
        raise ValueError(f"Cooldown for command {name} must not be negative")

    def decorator(func):
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Command {name} must be declared with async def")

        func._prefix_command = {
            "name": name,
            "description": description,
            "aliases": aliases or [],
            "usage": usage,
            "guild_only": guild_only,
            "args": args,
            "cooldown": cooldown,
        }
        return func

    return decorator
