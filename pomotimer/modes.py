"""Period kinds the timer cycles through."""

from __future__ import annotations

from enum import Enum


class Mode(Enum):
    FOCUS = "focus"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        """Accept a Mode, its value (``"shortBreak"``) or its snake name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"unknown mode: {value!r}")
