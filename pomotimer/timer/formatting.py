"""Display helpers for countdowns and totals."""

from __future__ import annotations

from .engine import Mode

_MODE_LABELS: dict[Mode, str] = {
    Mode.FOCUS: "Focus",
    Mode.SHORT_BREAK: "Short Break",
    Mode.LONG_BREAK: "Long Break",
}


def format_time(seconds: int) -> str:
    """``1500`` → ``"25:00"``."""
    seconds = max(0, int(seconds))
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


def format_total_time(seconds: int) -> str:
    """``5400`` → ``"1h 30m"``.  Leftover seconds are dropped."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def mode_label(mode: Mode | str) -> str:
    return _MODE_LABELS[Mode.parse(mode)]
