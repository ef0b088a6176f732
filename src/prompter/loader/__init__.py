"""Question file loading."""

from prompter.loader.errors import QuestionFileError
from prompter.loader.questions import load_questions, parse_questions
from prompter.loader.transforms import CONFIRM_TRANSFORMS, TEXT_TRANSFORMS

__all__ = [
    "QuestionFileError",
    "load_questions",
    "parse_questions",
    "TEXT_TRANSFORMS",
    "CONFIRM_TRANSFORMS",
]
