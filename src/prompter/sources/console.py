"""Console line source: prompts the user at the terminal via input()."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def console_line_source(prompt: str) -> str | None:
    """Read one line from stdin after displaying ``prompt``.

    Returns None when the stream is closed, the user interrupts, the input
    cannot be decoded, or the terminal raises an I/O error.
    """
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt, OSError, UnicodeDecodeError) as exc:
        logger.debug("console read failed: %r", exc)
        return None
