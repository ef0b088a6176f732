from __future__ import annotations

import logging
import os
from dataclasses import dataclass

OUTPUT_FORMATS = ("json", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PrompterConfig:
    log_level: str = "WARNING"
    output_format: str = "json"
    with_help: bool = False
    echo_prompts: bool = False  # log every rendered prompt at INFO

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"unknown output format: {self.output_format!r}")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PrompterConfig:
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("PROMPTER_LOG_LEVEL", "WARNING"),
            output_format=env.get("PROMPTER_OUTPUT_FORMAT", "json"),
            with_help=env.get("PROMPTER_WITH_HELP", "").lower() in ("1", "true", "yes"),
        )
