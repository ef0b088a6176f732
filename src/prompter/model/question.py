"""Question model: what to ask and how to interpret the reply."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class FreeText:
    """A question answered with arbitrary text.

    ``validate`` is called with the trimmed, non-empty input; ``transform``
    receives the accepted string and returns its replacement.
    """

    prompt: str
    help: str | None = None
    default: str | None = None
    validate: Callable[[str], bool] | None = None
    transform: Callable[[str], str] | None = None

    @property
    def required(self) -> bool:
        return self.default is None


@dataclass(frozen=True)
class Confirmation:
    """A yes/no question."""

    prompt: str
    help: str | None = None
    default: bool | None = None
    transform: Callable[[bool], bool] | None = None

    @property
    def required(self) -> bool:
        return self.default is None


Question = Union[FreeText, Confirmation]
