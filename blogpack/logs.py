"""Logging setup for the CLI."""

import logging
import sys

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = LOG_LEVEL) -> None:
    """Configure root logging once for a CLI run."""
    logging.basicConfig(
        level=log_level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    # Python-Markdown logs extension loading at DEBUG
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)
