"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys
from typing import TextIO

def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure root logger with sane defaults.

    Args:
        level: Logging level.
        stream: Destination stream; diagnostics go to stderr unless overridden.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
