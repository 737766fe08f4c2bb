"""Main entry point for the moonphase package."""

import logging

from moonphase.cli.cli import cli
from moonphase.env import get_env_var


def main() -> None:
    """Entry point for the moonphase CLI."""
    # Setup basic logging
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Default log level from environment
    log_level = get_env_var("MOONPHASE_LOG_LEVEL", "WARNING") or "WARNING"
    logger = logging.getLogger("moonphase")
    try:
        logger.setLevel(log_level.upper())
    except ValueError:
        logger.setLevel(logging.WARNING)
        logger.warning("Unknown MOONPHASE_LOG_LEVEL %r, using WARNING", log_level)

    # Run CLI
    cli()


if __name__ == "__main__":
    main()
