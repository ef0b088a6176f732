"""CLI commands: prompter batch / prompter preview -- work with question files."""

from __future__ import annotations

import json
import sys

import click

from prompter.cli.common import answer_text, answer_value, emit_help, line_source
from prompter.config import OUTPUT_FORMATS, PrompterConfig
from prompter.loader import QuestionFileError, load_questions
from prompter.model.answer import AnswerError
from prompter.model.question import Question
from prompter.resolver import render_prompt, resolve_many, resolve_many_with_help


def _load(path: str) -> list[tuple[str, Question]]:
    try:
        return load_questions(path)
    except QuestionFileError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("questions_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to $PROMPTER_OUTPUT_FORMAT or json)",
)
@click.option("--with-help/--no-help", default=None, help="Show help text before every question")
@click.pass_obj
def batch(
    config: PrompterConfig,
    questions_file: str,
    output_format: str | None,
    with_help: bool | None,
) -> None:
    """Ask every question in a JSON question file, in order.

    Prints the answers and exits with status 1 if any question failed.
    """
    questions = _load(questions_file)
    source = line_source(config)
    if with_help is None:
        with_help = config.with_help
    if with_help:
        results = resolve_many_with_help(questions, default_source=source, emit=emit_help)
    else:
        results = resolve_many(questions, default_source=source, emit=emit_help)

    if (output_format or config.output_format) == "json":
        click.echo(json.dumps({key: answer_value(answer) for key, answer in results}, indent=2))
    else:
        for key, answer in results:
            click.echo(f"{key}: {answer_text(answer)}")

    if any(isinstance(answer, AnswerError) for _, answer in results):
        sys.exit(1)


@click.command()
@click.argument("questions_file", type=click.Path(exists=True, dir_okay=False))
def preview(questions_file: str) -> None:
    """Print the prompt each question would show, without asking."""
    for key, question in _load(questions_file):
        click.echo(f"{key}: {render_prompt(question)!r}")
