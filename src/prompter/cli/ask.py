"""CLI commands: prompter ask / prompter confirm -- resolve a single question."""

from __future__ import annotations

import re
import sys

import click

from prompter.cli.common import answer_text, emit_help, line_source
from prompter.config import PrompterConfig
from prompter.model.answer import Answer, AnswerError, BoolAnswer, StringAnswer
from prompter.model.question import Confirmation, FreeText, Question
from prompter.resolver import resolve, resolve_with_help


def _run(config: PrompterConfig, question: Question) -> Answer:
    source = line_source(config)
    if config.with_help:
        return resolve_with_help(question, source, emit=emit_help)
    return resolve(question, source, emit=emit_help)


@click.command()
@click.argument("prompt")
@click.option("--default", "default", default=None, help="Answer used for an empty reply")
@click.option("--help-text", default=None, help="Shown before asking again")
@click.option("--pattern", default=None, help="Regular expression the whole answer must match")
@click.pass_obj
def ask(
    config: PrompterConfig,
    prompt: str,
    default: str | None,
    help_text: str | None,
    pattern: str | None,
) -> None:
    """Ask a free-text question and print the answer.

    Exits with status 1 if the answer is rejected or input fails.
    """
    validate = None
    if pattern is not None:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise click.BadParameter(str(exc), param_hint="--pattern") from exc
        validate = lambda value: compiled.fullmatch(value) is not None  # noqa: E731

    question = FreeText(prompt=prompt, help=help_text, default=default, validate=validate)
    answer = _run(config, question)

    if isinstance(answer, StringAnswer):
        click.echo(answer.value)
        return
    click.echo(f"Error: {answer_text(answer)}", err=True)
    sys.exit(1)


@click.command()
@click.argument("prompt")
@click.option(
    "--default",
    "default",
    type=click.Choice(["yes", "no"], case_sensitive=False),
    default=None,
    help="Answer used for an empty reply",
)
@click.option("--help-text", default=None, help="Shown before asking again")
@click.pass_obj
def confirm(
    config: PrompterConfig,
    prompt: str,
    default: str | None,
    help_text: str | None,
) -> None:
    """Ask a yes/no question.

    Exits 0 for yes, 1 for no and 2 if no answer could be read.
    """
    question = Confirmation(
        prompt=prompt,
        help=help_text,
        default=None if default is None else default.lower() == "yes",
    )
    answer = _run(config, question)

    if isinstance(answer, BoolAnswer):
        sys.exit(0 if answer.value else 1)
    if isinstance(answer, AnswerError):
        click.echo(f"Error: {answer_text(answer)}", err=True)
    sys.exit(2)
