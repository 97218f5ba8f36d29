"""
Command-line interface for Line Bisect.

Usage: line-bisect [OPTIONS] SEARCH FILE

Prints "<search> found: <line>." or "<search> not found in file <file>."
"""

import click
import sys

from .. import __version__
from .config import ConfigManager
from .constants import FOUND_MESSAGE, LOG_LEVELS, NOT_FOUND_MESSAGE
from .search import LineSearcher
from ..utils.logger_setup import LoggerManager, get_logger

logger = get_logger(__name__)


class UsageCommand(click.Command):
    """Command that prints help and exits with status 0 on bad arguments."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(ctx.get_help())
            click.echo(f"\nError: {e.format_message()}")
            ctx.exit(0)


@click.command(cls=UsageCommand)
@click.version_option(version=__version__, prog_name="line-bisect")
@click.argument('search')
@click.argument('file', type=click.Path(dir_okay=False))
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help='Logging level (overrides config)')
@click.option('--log-file', default=None, help='Write logs to this file')
@click.option('--verbose', '-v', is_flag=True, help='Log to stderr')
@click.option('--config-dir', default=None, help='Directory holding .line-bisect/config.yaml')
def cli(search, file, log_level, log_file, verbose, config_dir):
    """Binary-search a sorted text file for the line starting with SEARCH.

    Lines must be sorted by their uppercased text. Matching is
    case-insensitive and by prefix.
    """
    config_manager = ConfigManager(config_dir)
    config = config_manager.load()

    # Override config with command-line options
    if log_level:
        config.logging.level = log_level
    if log_file:
        config.logging.file = log_file
    if verbose:
        config.logging.console = True

    LoggerManager.setup_logging(
        log_file=config.logging.file,
        level=config.logging.level,
        console=config.logging.console,
    )

    problems = config_manager.validate(config)
    if problems:
        for problem in problems:
            click.echo(f"❌ Config error: {problem}", err=True)
        sys.exit(1)

    try:
        result = LineSearcher(config).search_file(file, search)
    except (OSError, ValueError) as e:
        logger.error(f"Search failed: {e}")
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if result.found:
        click.echo(FOUND_MESSAGE.format(search=search, line=result.text))
    else:
        click.echo(NOT_FOUND_MESSAGE.format(search=search, file=file))


def main():
    """Main entry point."""
    cli(prog_name="line-bisect")


if __name__ == '__main__':
    main()
