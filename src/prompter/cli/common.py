"""Helpers shared by the CLI commands.

Prompts and help text go to stderr so stdout carries only results.
"""

from __future__ import annotations

import logging
from typing import Any

import click

from prompter.config import PrompterConfig
from prompter.model.answer import Answer, AnswerError, BoolAnswer, StringAnswer
from prompter.sources.base import LineSource
from prompter.sources.callback import CallbackLineSource
from prompter.sources.console import console_line_source

logger = logging.getLogger("prompter.cli")


def line_source(config: PrompterConfig) -> LineSource:
    """Return a console source that shows its prompt on stderr."""

    def read(prompt: str) -> str | None:
        if config.echo_prompts:
            logger.info("prompt: %r", prompt)
        click.echo(prompt, nl=False, err=True)
        return console_line_source("")

    return CallbackLineSource(read)


def emit_help(message: str) -> None:
    click.echo(message, err=True)


def answer_value(answer: Answer) -> Any:
    """JSON-friendly rendering of an answer."""
    if isinstance(answer, (StringAnswer, BoolAnswer)):
        return answer.value
    if isinstance(answer, AnswerError):
        return {"error": answer.kind.value}
    return None


def answer_text(answer: Answer) -> str:
    """Single-line human rendering of an answer."""
    if isinstance(answer, StringAnswer):
        return answer.value
    if isinstance(answer, BoolAnswer):
        return "yes" if answer.value else "no"
    if isinstance(answer, AnswerError):
        return f"<error: {answer.kind.value}>"
    return "<no answer>"
