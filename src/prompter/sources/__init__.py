"""Line sources: where the resolver gets raw input from."""

from prompter.sources.base import LineSource
from prompter.sources.callback import CallbackLineSource
from prompter.sources.console import console_line_source
from prompter.sources.recording import PromptRecord, RecordingLineSource
from prompter.sources.scripted import ScriptedLineSource

__all__ = [
    "LineSource",
    "console_line_source",
    "CallbackLineSource",
    "ScriptedLineSource",
    "RecordingLineSource",
    "PromptRecord",
]
