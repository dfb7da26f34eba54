"""Logging configuration for the command line.

The library modules only create module-level loggers; handlers are installed
here, by the CLI, using rich for console output.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console = None) -> None:
    """Configure the root logger with a RichHandler writing to stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
