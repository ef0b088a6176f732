"""Tests for the question and answer value types."""

from __future__ import annotations

import dataclasses
import typing

import pytest

from prompter.model import (
    AnswerError,
    AskErrorKind,
    BoolAnswer,
    Confirmation,
    FreeText,
    NoAnswer,
    StringAnswer,
)


# ===========================================================================
# Answers
# ===========================================================================


class TestAnswers:
    def test_success_variants_are_ok(self) -> None:
        assert StringAnswer("x").ok
        assert BoolAnswer(False).ok

    def test_error_and_placeholder_are_not_ok(self) -> None:
        assert not AnswerError(AskErrorKind.INPUT).ok
        assert not NoAnswer().ok

    def test_error_kind_flags(self) -> None:
        err = AnswerError(AskErrorKind.VALIDATION)
        assert err.is_validation_error
        assert not err.is_input_error
        assert not err.is_invalid_type
        assert AnswerError(AskErrorKind.INPUT).is_input_error
        assert AnswerError(AskErrorKind.INVALID_TYPE).is_invalid_type

    def test_equality_by_value(self) -> None:
        assert StringAnswer("a") == StringAnswer("a")
        assert StringAnswer("a") != StringAnswer("b")
        assert BoolAnswer(True) != StringAnswer("True")
        assert NoAnswer() == NoAnswer()

    def test_frozen(self) -> None:
        answer = StringAnswer("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            answer.value = "b"  # type: ignore[misc]

    def test_error_kinds_are_closed(self) -> None:
        assert {k.value for k in AskErrorKind} == {"input", "invalid_type", "validation"}


# ===========================================================================
# Questions
# ===========================================================================


class TestQuestions:
    def test_free_text_defaults(self) -> None:
        q = FreeText(prompt="Name?")
        assert q.help is None
        assert q.default is None
        assert q.validate is None
        assert q.transform is None

    def test_confirmation_defaults(self) -> None:
        q = Confirmation(prompt="Continue?")
        assert q.help is None
        assert q.default is None
        assert q.transform is None

    def test_required_without_default(self) -> None:
        assert FreeText(prompt="Name?").required
        assert Confirmation(prompt="Continue?").required

    def test_not_required_with_default(self) -> None:
        assert not FreeText(prompt="Name?", default="anon").required
        assert not Confirmation(prompt="Continue?", default=False).required

    def test_frozen(self) -> None:
        q = FreeText(prompt="Name?")
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.prompt = "Other?"  # type: ignore[misc]

    def test_annotations_resolve(self) -> None:
        hints = typing.get_type_hints(FreeText)
        assert hints["validate"] == typing.Optional[typing.Callable[[str], bool]]
        assert hints["transform"] == typing.Optional[typing.Callable[[str], str]]
        confirm_hints = typing.get_type_hints(Confirmation)
        assert confirm_hints["transform"] == typing.Optional[typing.Callable[[bool], bool]]
