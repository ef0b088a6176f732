"""ScriptedLineSource: replays canned lines, for tests and non-interactive runs."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class ScriptedLineSource:
    """Line source that returns pre-loaded lines in order.

    Every prompt received is kept in ``prompts``. Once the script runs out
    the source reports an input failure, so an unanswerable question ends
    instead of reprompting forever.
    """

    def __init__(self, lines: Iterable[str | None] = ()) -> None:
        self._lines: deque[str | None] = deque(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self._lines:
            return None
        return self._lines.popleft()

    def feed(self, line: str | None) -> None:
        """Append another line to the end of the script."""
        self._lines.append(line)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    @property
    def calls(self) -> int:
        return len(self.prompts)
