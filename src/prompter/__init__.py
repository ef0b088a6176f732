"""Prompter: sequential terminal prompts resolved into typed answers."""

from prompter.model import (
    Answer,
    AnswerError,
    AskErrorKind,
    BoolAnswer,
    Confirmation,
    FreeText,
    NoAnswer,
    Question,
    StringAnswer,
)
from prompter.resolver import (
    answers_to_dict,
    apply_transform,
    confirmation_decoration,
    render_prompt,
    resolve,
    resolve_many,
    resolve_many_with_help,
    resolve_with_help,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # model
    "FreeText",
    "Confirmation",
    "Question",
    "AskErrorKind",
    "StringAnswer",
    "BoolAnswer",
    "AnswerError",
    "NoAnswer",
    "Answer",
    # resolver
    "confirmation_decoration",
    "render_prompt",
    "apply_transform",
    "resolve",
    "resolve_with_help",
    "resolve_many",
    "resolve_many_with_help",
    "answers_to_dict",
]
