"""Answer model: the outcome of resolving a single question."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class AskErrorKind(Enum):
    """Classification of a failed resolution."""

    INPUT = "input"
    INVALID_TYPE = "invalid_type"
    VALIDATION = "validation"


@dataclass(frozen=True)
class StringAnswer:
    """A free-text answer."""

    value: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class BoolAnswer:
    """A yes/no answer."""

    value: bool

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class AnswerError:
    """A resolution that produced no usable answer.

    Errors travel through the same channel as successful answers; callers
    are expected to check every result.
    """

    kind: AskErrorKind

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_input_error(self) -> bool:
        return self.kind is AskErrorKind.INPUT

    @property
    def is_validation_error(self) -> bool:
        return self.kind is AskErrorKind.VALIDATION

    @property
    def is_invalid_type(self) -> bool:
        return self.kind is AskErrorKind.INVALID_TYPE


@dataclass(frozen=True)
class NoAnswer:
    """Placeholder for a question that has not been answered."""

    @property
    def ok(self) -> bool:
        return False


Answer = Union[StringAnswer, BoolAnswer, AnswerError, NoAnswer]
