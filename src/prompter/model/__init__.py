"""Prompter model layer -- public type re-exports."""

from prompter.model.answer import (
    Answer,
    AnswerError,
    AskErrorKind,
    BoolAnswer,
    NoAnswer,
    StringAnswer,
)
from prompter.model.question import Confirmation, FreeText, Question

__all__ = [
    # question
    "FreeText",
    "Confirmation",
    "Question",
    # answer
    "AskErrorKind",
    "StringAnswer",
    "BoolAnswer",
    "AnswerError",
    "NoAnswer",
    "Answer",
]
