"""Command-line interface for moonphase."""

import logging
from pathlib import Path
from typing import Optional

import click

from moonphase import __version__
from moonphase.cli.output import OutputMode, Style, format_phase
from moonphase.constants import CACHE_FILE_NAME
from moonphase.dates import get_timezone, parse_date, today
from moonphase.env import get_env_var
from moonphase.errors import ConfigurationError, MoonPhaseError
from moonphase.providers import get_provider
from moonphase.service import PhaseService

logger = logging.getLogger("moonphase")


def set_debug_logging(debug: bool) -> None:
    """Set debug logging level if debug flag is True."""
    if debug:
        logger.setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled - logging set to DEBUG level")


def default_cache_path() -> Path:
    """Get the cache file path from the environment or the home directory.

    Raises:
        ConfigurationError: If no home directory can be determined
    """
    env_path = get_env_var("MOONPHASE_SAVEFILE", "")
    if env_path:
        return Path(env_path).expanduser()
    try:
        return Path.home() / CACHE_FILE_NAME
    except RuntimeError as e:
        raise ConfigurationError(f"Could not determine home directory: {e}") from e


@click.command()
@click.version_option(version=__version__)
@click.option("--plaintext", is_flag=True, help="Get result in plain English.")
@click.option(
    "--savefile",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"File to persist output to (default: ~/{CACHE_FILE_NAME})",
)
@click.option("--date", "date_text", help="Date to get phase for, defaults to today.")
@click.option(
    "--timezone",
    "tz_name",
    help="IANA timezone for the calendar date (default: system local time)",
)
@click.option("--no-cache", is_flag=True, help="Neither read nor write the save file.")
@click.option("--debug", is_flag=True, help="Enable debug mode with verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    plaintext: bool,
    savefile: Optional[Path],
    date_text: Optional[str],
    tz_name: Optional[str],
    no_cache: bool,
    debug: bool,
) -> None:
    """Print the Moon's phase for a date."""
    set_debug_logging(debug)
    mode = OutputMode.PLAINTEXT if plaintext else OutputMode.SYMBOLIC

    try:
        tz = get_timezone(tz_name or get_env_var("MOONPHASE_TIMEZONE", ""))
        target = parse_date(date_text) if date_text else today(tz)

        cache_path: Optional[Path] = None
        if no_cache:
            if savefile:
                click.echo(
                    Style.warning("--savefile is ignored with --no-cache"), err=True
                )
        else:
            cache_path = savefile or default_cache_path()

        logger.debug("Looking up phase for %s (cache: %s)", target, cache_path)
        service = PhaseService(get_provider(), tz, cache_path=cache_path)
        phase = service.lookup(target)
    except MoonPhaseError as e:
        logger.debug("Lookup failed", exc_info=True)
        click.echo(Style.error(str(e)), err=True)
        ctx.exit(1)

    click.echo(format_phase(phase, mode))


if __name__ == "__main__":
    cli()
