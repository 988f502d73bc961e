"""
Logging setup with Rich console output.

Modules log through logging.getLogger(__name__); the CLI calls
setup_logging() once at startup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_logging_configured = False
_console = Console(stderr=True)


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Configure the root logger. Subsequent calls only change the level.
    """
    global _logging_configured

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if _logging_configured:
        return

    root_logger.handlers.clear()
    if use_rich:
        handler: logging.Handler = RichHandler(
            console=_console,
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"))
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    _logging_configured = True
