"""Build questions from JSON question files."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Callable

from prompter.loader.errors import QuestionFileError
from prompter.loader.transforms import CONFIRM_TRANSFORMS, TEXT_TRANSFORMS
from prompter.model.question import Confirmation, FreeText, Question

logger = logging.getLogger(__name__)

_TEXT_TYPES = ("text", "freetext", "free_text")
_CONFIRM_TYPES = ("confirm", "confirmation", "yes_no")


def load_questions(path: str | Path) -> list[tuple[str, Question]]:
    """Read a JSON question file and return its (key, question) pairs."""
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuestionFileError(f"{path}: not UTF-8 (byte {exc.start})") from exc
    except OSError as exc:
        raise QuestionFileError(f"{path}: cannot read ({exc.strerror or exc})") from exc
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise QuestionFileError(
            f"{path}: invalid JSON at line {exc.lineno} column {exc.colno}"
        ) from exc
    questions = parse_questions(data)
    logger.debug("loaded %d question(s) from %s", len(questions), path)
    return questions


def parse_questions(data: Any) -> list[tuple[str, Question]]:
    """Convert decoded JSON into (key, question) pairs.

    Accepts either a list of question objects or a mapping with a
    ``questions`` list.
    """
    if isinstance(data, dict):
        if "questions" not in data:
            raise QuestionFileError("expected a 'questions' list")
        data = data["questions"]
    if not isinstance(data, list):
        raise QuestionFileError("expected a list of questions")
    return [_parse_entry(i, entry) for i, entry in enumerate(data)]


def _parse_entry(index: int, entry: Any) -> tuple[str, Question]:
    if not isinstance(entry, dict):
        raise QuestionFileError("expected an object", index=index)

    key = entry.get("key")
    if not isinstance(key, str) or not key:
        raise QuestionFileError("missing 'key'", index=index)
    prompt = entry.get("prompt")
    if not isinstance(prompt, str):
        raise QuestionFileError("missing 'prompt'", index=index, key=key)
    help_text = entry.get("help")
    if help_text is not None and not isinstance(help_text, str):
        raise QuestionFileError("'help' must be a string", index=index, key=key)

    kind = str(entry.get("type", "text")).lower()
    if kind in _TEXT_TYPES:
        return key, _free_text(index, key, prompt, help_text, entry)
    if kind in _CONFIRM_TYPES:
        return key, _confirmation(index, key, prompt, help_text, entry)
    raise QuestionFileError(f"unknown question type {kind!r}", index=index, key=key)


def _free_text(
    index: int, key: str, prompt: str, help_text: str | None, entry: dict[str, Any]
) -> FreeText:
    default = entry.get("default")
    if default is not None and not isinstance(default, str):
        raise QuestionFileError("text default must be a string", index=index, key=key)

    validate: Callable[[str], bool] | None = None
    pattern = entry.get("pattern")
    if pattern is not None:
        try:
            compiled = re.compile(pattern)
        except (re.error, TypeError) as exc:
            raise QuestionFileError(f"bad pattern: {exc}", index=index, key=key) from exc
        validate = lambda value: compiled.fullmatch(value) is not None  # noqa: E731

    return FreeText(
        prompt=prompt,
        help=help_text,
        default=default,
        validate=validate,
        transform=_lookup(index, key, entry.get("transform"), TEXT_TRANSFORMS),
    )


def _confirmation(
    index: int, key: str, prompt: str, help_text: str | None, entry: dict[str, Any]
) -> Confirmation:
    default = entry.get("default")
    if default is not None and not isinstance(default, bool):
        raise QuestionFileError("confirm default must be true or false", index=index, key=key)
    if "pattern" in entry:
        raise QuestionFileError("'pattern' only applies to text questions", index=index, key=key)

    return Confirmation(
        prompt=prompt,
        help=help_text,
        default=default,
        transform=_lookup(index, key, entry.get("transform"), CONFIRM_TRANSFORMS),
    )


def _lookup(index: int, key: str, name: Any, table: dict[str, Any]) -> Any:
    if name is None:
        return None
    if not isinstance(name, str) or name not in table:
        known = ", ".join(sorted(table))
        raise QuestionFileError(
            f"unknown transform {name!r} (expected one of: {known})", index=index, key=key
        )
    return table[name]
