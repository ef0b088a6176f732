"""CallbackLineSource: delegates to a user-supplied function."""

from __future__ import annotations

from typing import Callable


class CallbackLineSource:
    """Line source that delegates reading to a callback.

    The callback receives the rendered prompt and returns the raw line, or
    None on failure.
    """

    def __init__(self, callback: Callable[[str], str | None]) -> None:
        self._callback = callback

    def __call__(self, prompt: str) -> str | None:
        return self._callback(prompt)
