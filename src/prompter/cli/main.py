"""Prompter CLI entry point: Click group with subcommands."""

import logging

import click

from prompter import __version__
from prompter.config import LOG_LEVELS, PrompterConfig


def build_config(log_level: str | None, echo_prompts: bool) -> PrompterConfig:
    """Merge command-line options over the environment settings.

    ``--echo-prompts`` raises the log level to INFO unless a more verbose
    level is already in effect.
    """
    config = PrompterConfig.from_env()
    if log_level is None and not echo_prompts:
        return config
    if log_level is None:
        log_level = config.log_level if config.level <= logging.INFO else "INFO"
    return PrompterConfig(
        log_level=log_level,
        output_format=config.output_format,
        with_help=config.with_help,
        echo_prompts=echo_prompts,
    )


@click.group()
@click.version_option(version=__version__, prog_name="prompter")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to $PROMPTER_LOG_LEVEL or WARNING)",
)
@click.option("--echo-prompts", is_flag=True, default=False, help="Log every prompt shown")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, echo_prompts: bool) -> None:
    """Prompter - ask questions at the terminal and collect typed answers."""
    try:
        config = build_config(log_level, echo_prompts)
    except ValueError as exc:
        raise click.UsageError(f"bad environment setting: {exc}") from exc
    logging.basicConfig(
        level=config.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from prompter.cli.ask import ask, confirm  # noqa: E402
from prompter.cli.batch import batch, preview  # noqa: E402

cli.add_command(ask)
cli.add_command(confirm)
cli.add_command(batch)
cli.add_command(preview)
