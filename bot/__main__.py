import logging
import sys

from bot.cli import setup_logging
from bot.core import DiscordBot
from config.settings import load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the Discord bot."""
    try:
        settings = load_settings()
        setup_logging(settings.log_level)

        logger.info("Initializing Discord bot...")
        bot = DiscordBot(settings)
        bot.run()

    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
