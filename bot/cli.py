import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from bot.core import DiscordBot
from config.settings import load_settings

app = typer.Typer(
    name="pod-bot",
    help="Prefix command bot for Discord",
    add_completion=False,
)

ENV_TEMPLATE = """# Discord Bot Configuration
DISCORD_TOKEN=your_discord_bot_token_here
BOT_PREFIX=!
DEFAULT_COOLDOWN=3
ENVIRONMENT=development
LOG_LEVEL=INFO
"""


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@app.command()
def run(
    dev: bool = typer.Option(False, "--dev", help="Run in development mode"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Run the Discord bot."""
    if dev:
        os.environ["ENVIRONMENT"] = "development"
        os.environ["DEBUG"] = "true"

    if log_level:
        os.environ["LOG_LEVEL"] = log_level

    try:
        settings = load_settings()
    except ValidationError as e:
        typer.echo(f"❌ Invalid configuration:\n{e}", err=True)
        raise typer.Exit(code=1)

    setup_logging(log_level or settings.log_level)

    bot = DiscordBot(settings)
    bot.run()


@app.command()
def init(
    directory: Optional[str] = typer.Option(None, help="Directory to initialize")
) -> None:
    """Initialize a new bot configuration."""
    target_dir = Path(directory) if directory else Path.cwd()

    if not target_dir.exists():
        target_dir.mkdir(parents=True)

    env_file = target_dir / ".env"
    if env_file.exists():
        typer.echo(f"⚠️  {env_file} already exists, leaving it untouched")
        return

    env_file.write_text(ENV_TEMPLATE)
    typer.echo(f"✅ Bot configuration written to {env_file}")


@app.command()
def plugins() -> None:
    """List the built-in plugins and whether they are enabled."""
    from bot.core.plugin_loader import PluginLoader
    from plugins import AVAILABLE_PLUGINS

    try:
        enabled_plugins = load_settings().enabled_plugins
    except ValidationError:
        # A missing token shouldn't stop us from listing plugins
        try:
            enabled_plugins = load_settings(discord_token="").enabled_plugins
        except ValidationError as e:
            typer.echo(f"❌ Invalid configuration:\n{e}", err=True)
            raise typer.Exit(code=1)

    typer.echo("📦 Available Plugins:")
    for name, module in AVAILABLE_PLUGINS.items():
        metadata = PluginLoader.extract_metadata(module)
        enabled = "✅" if name in enabled_plugins else "❌"
        typer.echo(f"  {enabled} {name} - {metadata.description}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
