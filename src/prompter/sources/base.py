"""Line-source protocol definition."""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Protocol for callables that display a prompt and return one line.

    Returning ``None`` signals an input failure (closed stream, interrupt,
    I/O error). The resolver turns that into an ``INPUT`` error answer.
    """

    def __call__(self, prompt: str) -> str | None: ...
