"""Logging setup for the CLI.

Library modules only create module loggers; handlers are installed here, once,
by the entry-point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Route stdlib logging through Rich on stderr."""

    resolved = getattr(logging, level.upper(), logging.WARNING)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(resolved, logging.WARNING))
