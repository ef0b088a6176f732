"""Named transforms that question files may refer to."""

from __future__ import annotations

from typing import Callable

TEXT_TRANSFORMS: dict[str, Callable[[str], str]] = {
    "upper": str.upper,
    "lower": str.lower,
    "strip": str.strip,
    "title": str.title,
    "capitalize": str.capitalize,
}

CONFIRM_TRANSFORMS: dict[str, Callable[[bool], bool]] = {
    "negate": lambda value: not value,
}
