# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Route dailystreak logs to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("dailystreak")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level.upper())
