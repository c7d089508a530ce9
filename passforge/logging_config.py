"""
passforge.logging_config
Console logging through rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    root = logging.getLogger()
    if root.handlers:
        return  # already configured

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )
