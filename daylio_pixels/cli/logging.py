"""
Logging setup for CLI commands.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

from daylio_pixels.core.logging_config import LOGGER_NAME, get_logger

CLI_HANDLER_NAME = "daylio_pixels.cli"


def setup_cli_logging(name: str, verbose: bool = False) -> logging.Logger:
    """
    Route package logs to stderr through rich.

    Calling this again replaces the handler installed by the previous call.

    Args:
        name: Command name, used as the child logger name
        verbose: Log at INFO instead of WARNING

    Returns:
        Logger for the command
    """
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        if handler.get_name() == CLI_HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.set_name(CLI_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    return get_logger(name)
