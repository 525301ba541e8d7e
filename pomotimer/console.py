"""Headless terminal host.

Wires a :class:`TimerEngine` to a :class:`TickScheduler` and a
:class:`CompletionNotifier` and writes one status line per tick.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from PyQt6.QtCore import QObject, pyqtSignal

from .audio.notifier import CompletionNotifier
from .settings import Settings
from .timer.engine import Mode, TimerEngine, TimerSnapshot
from .timer.formatting import format_time, format_total_time, mode_label
from .timer.scheduler import TickScheduler, TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class ConsoleSession(QObject):
    """One timer session printed to a text stream.

    Signals
    -------
    idle(snapshot)
        Emitted when a period completes and the next one is not
        auto-started, so the host can end the session.
    """

    idle = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: Settings | None = None,
        stream: TextIO | None = None,
        notifier: CompletionNotifier | None = None,
        auto_start_breaks: bool = False,
        auto_start_focus: bool = False,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._stream = stream or sys.stdout
        self.auto_start_breaks = auto_start_breaks
        self.auto_start_focus = auto_start_focus
        self._just_completed = False
        self._pending_auto_start = False

        self.notifier = notifier or CompletionNotifier(self)
        self.engine = TimerEngine(self, settings=settings, notifier=self.notifier)
        self.scheduler = TickScheduler(self, interval_ms=interval_ms)
        self.scheduler.attach(self.engine)

        self.engine.tick_elapsed.connect(self._on_tick)
        self.engine.period_completed.connect(self._on_period_completed)
        self.engine.state_changed.connect(self._on_state_changed)

    # ── public API ────────────────────────────────────────────────────

    def start(self) -> None:
        self._write_status(self.engine.snapshot())
        self.engine.start()

    def stop(self) -> None:
        self.engine.pause()
        self.scheduler.detach()

    def status_line(self, snap: TimerSnapshot) -> str:
        state = "running" if snap.is_running else "paused"
        return (
            f"[{mode_label(snap.mode)}] {format_time(snap.remaining_seconds)}"
            f" {snap.progress_fraction:4.0%} {state}"
            f" | focus {format_total_time(snap.total_focus_seconds)}"
            f" | periods {snap.completed_focus_periods}"
            f" ({snap.cycle_position}/{snap.cycles_until_long_break})"
        )

    # ── slots ─────────────────────────────────────────────────────────

    def _on_tick(self, _remaining: int) -> None:
        self._write_status(self.engine.snapshot())

    def _on_period_completed(self, ended: Mode) -> None:
        self._write(f"{mode_label(ended)} complete!")
        self._just_completed = True
        if ended is Mode.FOCUS:
            self._pending_auto_start = self.auto_start_breaks
        else:
            self._pending_auto_start = self.auto_start_focus

    def _on_state_changed(self, snap: TimerSnapshot) -> None:
        # Completion emits state_changed once the next mode is seeded.
        if not self._just_completed:
            return
        self._just_completed = False
        if self._pending_auto_start:
            self._pending_auto_start = False
            logger.info("Auto-starting %s", snap.mode.value)
            self.engine.start()
        snap = self.engine.snapshot()
        self._write_status(snap)
        if not snap.is_running:
            self.idle.emit(snap)

    # ── internal ──────────────────────────────────────────────────────

    def _write_status(self, snap: TimerSnapshot) -> None:
        self._write(self.status_line(snap))

    def _write(self, text: str) -> None:
        self._stream.write(text + "\n")
        self._stream.flush()
