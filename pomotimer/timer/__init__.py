"""Timer package."""

from .engine import (
    TimerEngine,
    TimerSnapshot,
    Mode,
)
from .scheduler import TickScheduler, TICK_INTERVAL_MS
from .formatting import format_time, format_total_time, mode_label

__all__ = [
    "TimerEngine",
    "TimerSnapshot",
    "Mode",
    "TickScheduler",
    "TICK_INTERVAL_MS",
    "format_time",
    "format_total_time",
    "mode_label",
]
