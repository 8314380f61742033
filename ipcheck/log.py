"""
Logging setup for IPCheck
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """
    Route log records through rich on stderr.

    stdout carries only the report, so diagnostics never mix into it.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        console: Console to write to (stderr console if None)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True
    )

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True
    )
