"""
Logging configuration module for the simulator.

Installs a rich handler on the root logger, so the anomalies the engine
reports through catchery (dangling equipment, unknown races, missing loot
templates) show up colored next to the demo output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO, show_locals: bool = False) -> None:
    """
    Sets up logging with rich colored output.

    Args:
        level (int):
            The logging level to set. Defaults to logging.INFO.
        show_locals (bool):
            Whether tracebacks include local variables.

    """
    console = Console(width=120, stderr=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=show_locals,
    )
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The logger instance.

    """
    return logging.getLogger(name)
