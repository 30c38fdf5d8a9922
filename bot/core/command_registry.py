import logging
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .message_handler import PrefixCommand

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Name and alias lookup for prefix commands."""

    def __init__(self) -> None:
        self.commands: Dict[str, "PrefixCommand"] = {}
        self.aliases: Dict[str, str] = {}

    def add_command(self, command: "PrefixCommand") -> None:
        name = command.name.lower()
        if name in self.commands:
            logger.warning(f"Command {name} is already registered, replacing it")
            self.remove_command(name)

        self.commands[name] = command

        for alias in command.aliases:
            alias = alias.lower()
            if alias in self.aliases and self.aliases[alias] != name:
                logger.warning(f"Alias {alias} now points to {name} instead of {self.aliases[alias]}")
            self.aliases[alias] = name

        logger.debug(f"Added prefix command: {name} (aliases: {command.aliases})")

    def remove_command(self, name: str) -> None:
        command = self.get(name)
        if command is None:
            return

        primary = command.name.lower()
        self.commands.pop(primary, None)
        for alias, target in list(self.aliases.items()):
            if target == primary:
                del self.aliases[alias]

        logger.debug(f"Removed prefix command: {primary}")

    def get(self, name: str) -> Optional["PrefixCommand"]:
        normalized = name.lower()

        if normalized in self.commands:
            return self.commands[normalized]

        target = self.aliases.get(normalized)
        if target:
            return self.commands.get(target)

        return None

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def get_all(self) -> List["PrefixCommand"]:
        return list(self.commands.values())

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self.commands)
