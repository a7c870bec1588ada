"""Logging setup.

Records go to stderr through Rich so they never mix with the result printed
on stdout. Modules log through `logging.getLogger(__name__)`; only the CLI
calls `setup_logging`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_handler: RichHandler | None = None


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the root logger and set its level."""

    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        _handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        root.addHandler(_handler)
    root.setLevel(level)
    # httpx/httpcore are chatty at DEBUG; keep them one step quieter.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(max(logging.getLevelName(level), logging.INFO))
    return root
