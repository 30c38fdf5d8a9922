from .plugin import GeneralPlugin

PLUGIN_METADATA = {
    "name": "General",
    "version": "1.0.0",
    "author": "pod-bot",
    "description": "Basic commands: ping, beep, args, server, user-info and avatar",
    "dependencies": [],
}


def setup(bot):
    return GeneralPlugin(bot)
