from .basic import setup_basic_commands
from .info import setup_info_commands

__all__ = [
    "setup_basic_commands",
    "setup_info_commands",
]
