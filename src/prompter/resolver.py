"""Answer resolution: turn a question plus raw input into a typed answer.

Every public entry point returns an ``Answer`` value. Input failures,
validation failures and transform mismatches come back as ``AnswerError``
rather than being raised; only a non-question argument raises.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

import click

from prompter.model.answer import (
    Answer,
    AnswerError,
    AskErrorKind,
    BoolAnswer,
    NoAnswer,
    StringAnswer,
)
from prompter.model.question import Confirmation, FreeText, Question
from prompter.sources.base import LineSource
from prompter.sources.console import console_line_source

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


# ---------------------------------------------------------------------------
# Prompt rendering
# ---------------------------------------------------------------------------


def confirmation_decoration(default: bool | None) -> str:
    """Return the suffix shown after a yes/no prompt.

    The capital letter marks the reply an empty line maps to.
    """
    if default is None:
        return " [y/n] "
    if default:
        return " [Y/n] "
    return " [y/N] "


def render_prompt(question: Question) -> str:
    """Return the exact text handed to the line source for ``question``."""
    if isinstance(question, FreeText):
        return f"{question.prompt} "
    if isinstance(question, Confirmation):
        return question.prompt + confirmation_decoration(question.default)
    raise TypeError(_not_a_question(question))


# ---------------------------------------------------------------------------
# Single question
# ---------------------------------------------------------------------------


def resolve(
    question: Question,
    line_source: LineSource | None = None,
    *,
    emit: Emitter | None = None,
) -> Answer:
    """Ask ``question`` once and return the resulting answer.

    Empty input on a question without a default, and unrecognised replies to
    a confirmation, fall through to the help-then-reprompt path. A failed
    validation is returned as an error; re-asking is up to the caller.
    """
    source = console_line_source if line_source is None else line_source
    answer = _attempt(question, source, emit or click.echo)
    return apply_transform(question, answer)


def resolve_with_help(
    question: Question,
    line_source: LineSource | None = None,
    *,
    emit: Emitter | None = None,
) -> Answer:
    """Show the question's help text (if any), then ask it.

    There is no attempt counter: a source that never yields a usable reply
    keeps the question reprompting.
    """
    source = console_line_source if line_source is None else line_source
    answer = _attempt_with_help(question, source, emit or click.echo)
    return apply_transform(question, answer)


def apply_transform(question: Question, answer: Answer) -> Answer:
    """Apply the question's transform to the payload of a successful answer.

    Error and placeholder answers pass through untouched. An answer whose
    variant does not match the question kind becomes an ``INVALID_TYPE``
    error and the transform is not called.
    """
    if isinstance(answer, (AnswerError, NoAnswer)):
        return answer
    if not isinstance(question, (FreeText, Confirmation)):
        raise TypeError(_not_a_question(question))
    if question.transform is None:
        return answer

    if isinstance(question, FreeText) and isinstance(answer, StringAnswer):
        return StringAnswer(question.transform(answer.value))
    if isinstance(question, Confirmation) and isinstance(answer, BoolAnswer):
        return BoolAnswer(question.transform(answer.value))

    logger.warning(
        "transform skipped: %s answer for %s question %r",
        type(answer).__name__,
        type(question).__name__,
        question.prompt,
    )
    return AnswerError(AskErrorKind.INVALID_TYPE)


def _attempt_with_help(question: Question, source: LineSource, emit: Emitter) -> Answer:
    if question.help is not None:
        logger.debug("showing help for %r", question.prompt)
        emit(question.help)
    return _attempt(question, source, emit)


def _attempt(question: Question, source: LineSource, emit: Emitter) -> Answer:
    prompt = render_prompt(question)
    raw = source(prompt)
    if raw is None:
        logger.debug("input failure on prompt %r", prompt)
        return AnswerError(AskErrorKind.INPUT)

    line = raw.strip()
    if not line:
        if question.default is not None:
            logger.debug("empty input on %r, using default", prompt)
            return _default_answer(question)
        logger.debug("empty input on required %r, reprompting", prompt)
        return _attempt_with_help(question, source, emit)

    answer = _interpret(question, line)
    if answer is None:
        logger.debug("unrecognised reply %r on %r, reprompting", line, prompt)
        return _attempt_with_help(question, source, emit)
    return answer


def _default_answer(question: Question) -> Answer:
    if isinstance(question, FreeText):
        return StringAnswer(question.default)
    if isinstance(question, Confirmation):
        return BoolAnswer(question.default)
    raise TypeError(_not_a_question(question))


def _interpret(question: Question, line: str) -> Answer | None:
    """Map a trimmed, non-empty reply to an answer; None means ask again."""
    if isinstance(question, FreeText):
        validate = question.validate or _accept_all
        if validate(line):
            return StringAnswer(line)
        logger.debug("validation rejected %r", line)
        return AnswerError(AskErrorKind.VALIDATION)
    if isinstance(question, Confirmation):
        reply = line.lower()
        if reply == "y":
            return BoolAnswer(True)
        if reply == "n":
            return BoolAnswer(False)
        return None
    raise TypeError(_not_a_question(question))


def _accept_all(value: str) -> bool:
    return True


def _not_a_question(obj: object) -> str:
    return f"expected FreeText or Confirmation, got {type(obj).__name__}"


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------


def resolve_many(
    questions: Iterable[tuple[str, Question]],
    line_sources: Sequence[LineSource] | None = None,
    *,
    default_source: LineSource | None = None,
    emit: Emitter | None = None,
) -> list[tuple[str, Answer]]:
    """Ask each question once, in order, and pair every answer with its key.

    ``line_sources`` are handed out one per question from the left. When
    they run out (or none are given) the remaining questions read from
    ``default_source``, which is the console unless overridden.
    """
    fallback = console_line_source if default_source is None else default_source
    sources = iter(line_sources or ())
    results: list[tuple[str, Answer]] = []
    for key, question in questions:
        source = next(sources, fallback)
        logger.debug("resolving %r", key)
        results.append((key, resolve(question, source, emit=emit)))
    return results


def resolve_many_with_help(
    questions: Iterable[tuple[str, Question]],
    *,
    default_source: LineSource | None = None,
    emit: Emitter | None = None,
) -> list[tuple[str, Answer]]:
    """Like ``resolve_many`` but every question goes through the help path.

    All questions read from the default source.
    """
    fallback = console_line_source if default_source is None else default_source
    results: list[tuple[str, Answer]] = []
    for key, question in questions:
        logger.debug("resolving %r with help", key)
        results.append((key, resolve_with_help(question, fallback, emit=emit)))
    return results


def answers_to_dict(pairs: Iterable[tuple[str, Answer]]) -> dict[str, Any]:
    """Collect successful answer payloads by key; later keys win."""
    values: dict[str, Any] = {}
    for key, answer in pairs:
        if isinstance(answer, (StringAnswer, BoolAnswer)):
            values[key] = answer.value
    return values
