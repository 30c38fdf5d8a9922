from .plugin import HelpPlugin

PLUGIN_METADATA = {
    "name": "Help",
    "version": "1.0.0",
    "author": "pod-bot",
    "description": "Lists commands and shows usage information for a single command",
    "dependencies": [],
}


def setup(bot):
    return HelpPlugin(bot)
