"""Shared test helpers for pomotimer."""

from pomotimer.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def __call__(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __len__(self):
        return len(self.items)

    @property
    def last(self):
        return self.items[-1] if self.items else None


def run_ticks(engine: TimerEngine, count: int) -> None:
    """Deliver *count* scheduler ticks synchronously."""
    for _ in range(count):
        engine.tick()


def complete_period(engine: TimerEngine) -> None:
    """Start (if needed) and tick until the current period completes."""
    engine.start()
    run_ticks(engine, engine.remaining_seconds)
