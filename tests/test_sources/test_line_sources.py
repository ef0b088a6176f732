"""Tests for the line-source implementations."""

from __future__ import annotations

import io

import pytest

from prompter.sources import (
    CallbackLineSource,
    PromptRecord,
    RecordingLineSource,
    ScriptedLineSource,
    console_line_source,
)


# ===========================================================================
# console_line_source
# ===========================================================================


class TestConsoleLineSource:
    def test_returns_line(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("builtins.input", lambda prompt="": f"answer to {prompt}")
        assert console_line_source("Q? ") == "answer to Q? "

    @pytest.mark.parametrize("exc", [EOFError, KeyboardInterrupt, OSError])
    def test_failures_return_none(self, monkeypatch: pytest.MonkeyPatch, exc: type) -> None:
        def broken(prompt: str = "") -> str:
            raise exc

        monkeypatch.setattr("builtins.input", broken)
        assert console_line_source("Q? ") is None

    def test_undecodable_input_returns_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8", errors="strict")
        monkeypatch.setattr("sys.stdin", stdin)
        assert console_line_source("") is None


# ===========================================================================
# ScriptedLineSource
# ===========================================================================


class TestScriptedLineSource:
    def test_replays_in_order(self) -> None:
        source = ScriptedLineSource(["a", "b"])
        assert source("1") == "a"
        assert source("2") == "b"

    def test_exhausted_returns_none(self) -> None:
        source = ScriptedLineSource(["a"])
        source("1")
        assert source("2") is None

    def test_records_prompts(self) -> None:
        source = ScriptedLineSource(["a"])
        source("first")
        source("second")
        assert source.prompts == ["first", "second"]
        assert source.calls == 2

    def test_feed_and_remaining(self) -> None:
        source = ScriptedLineSource()
        assert source.remaining == 0
        source.feed("late")
        assert source.remaining == 1
        assert source("x") == "late"
        assert source.remaining == 0

    def test_scripted_failure(self) -> None:
        source = ScriptedLineSource([None, "a"])
        assert source("x") is None
        assert source("y") == "a"


# ===========================================================================
# CallbackLineSource
# ===========================================================================


class TestCallbackLineSource:
    def test_delegates_to_callback(self) -> None:
        source = CallbackLineSource(lambda prompt: prompt.upper())
        assert source("hello") == "HELLO"

    def test_passes_failure_through(self) -> None:
        assert CallbackLineSource(lambda prompt: None)("x") is None


# ===========================================================================
# RecordingLineSource
# ===========================================================================


class TestRecordingLineSource:
    def test_records_transcript(self) -> None:
        recorder = RecordingLineSource(ScriptedLineSource(["a"]))

        recorder("Q1 ")
        recorder("Q2 ")

        assert recorder.transcript() == [
            PromptRecord(prompt="Q1 ", line="a"),
            PromptRecord(prompt="Q2 ", line=None),
        ]

    def test_returns_inner_line(self) -> None:
        recorder = RecordingLineSource(CallbackLineSource(lambda prompt: "echo"))
        assert recorder("Q ") == "echo"

    def test_clear_empties_transcript(self) -> None:
        recorder = RecordingLineSource(ScriptedLineSource(["a"]))
        recorder("Q ")
        assert len(recorder.transcript()) == 1

        recorder.clear()
        assert recorder.transcript() == []

    def test_transcript_returns_copy(self) -> None:
        recorder = RecordingLineSource(ScriptedLineSource(["a"]))
        recorder("Q ")

        t1 = recorder.transcript()
        t2 = recorder.transcript()
        assert t1 == t2
        assert t1 is not t2


# ===========================================================================
# Imports from __init__.py
# ===========================================================================


class TestSourceExports:
    def test_all_exports_importable(self) -> None:
        from prompter.sources import LineSource

        assert LineSource is not None
        assert console_line_source is not None
        assert PromptRecord is not None
