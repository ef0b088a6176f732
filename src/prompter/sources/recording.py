"""RecordingLineSource: wraps another line source and records every read."""

from __future__ import annotations

from dataclasses import dataclass

from prompter.sources.base import LineSource


@dataclass(frozen=True)
class PromptRecord:
    """A recorded prompt/line exchange."""

    prompt: str
    line: str | None


class RecordingLineSource:
    """Line source decorator that records all exchanges.

    Every call is forwarded to the inner source, and both the rendered
    prompt and the raw line (None on failure) are recorded.
    """

    def __init__(self, inner: LineSource) -> None:
        self._inner = inner
        self._records: list[PromptRecord] = []

    def __call__(self, prompt: str) -> str | None:
        line = self._inner(prompt)
        self._records.append(PromptRecord(prompt=prompt, line=line))
        return line

    def transcript(self) -> list[PromptRecord]:
        """Return the list of all recorded exchanges."""
        return list(self._records)

    def clear(self) -> None:
        """Clear the recording history."""
        self._records.clear()
