"""pomotimer: a focus/break cycle timer."""

from .settings import Settings, coerce_settings
from .timer import Mode, TimerEngine, TimerSnapshot, TickScheduler
from .audio import CompletionNotifier

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "coerce_settings",
    "Mode",
    "TimerEngine",
    "TimerSnapshot",
    "TickScheduler",
    "CompletionNotifier",
    "__version__",
]
