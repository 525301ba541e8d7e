"""Timer state machine for pomotimer.

Modes
-----
FOCUS         Focused work; elapsed seconds count toward focus time.
SHORT_BREAK   Short rest between focus periods.
LONG_BREAK    Long rest after every ``cycles_until_long_break`` focus periods.

Each mode is either running or idle.  The mode changes only on period
completion (automatic) or ``switch_mode`` (manual).  The run flag changes
only on ``start``/``pause``/``toggle`` and is forced off by completion,
``reset`` and ``switch_mode``.  There is no terminal state.

Transitions on completion
-------------------------
FOCUS → LONG_BREAK    completed focus count is a multiple of the cycle length
FOCUS → SHORT_BREAK   otherwise
*_BREAK → FOCUS

The engine owns no timer.  A scheduler calls ``tick()`` about once a
second while the engine is running, which keeps every transition
testable by calling ``tick()`` in a loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from ..modes import Mode
from ..settings import Settings, coerce_settings

logger = logging.getLogger(__name__)


Notifier = Callable[[Mode], Any]


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the engine for display."""

    mode: Mode
    remaining_seconds: int
    is_running: bool
    completed_focus_periods: int
    total_focus_seconds: int
    duration_seconds: int
    cycles_until_long_break: int

    @property
    def progress_fraction(self) -> float:
        """0.0 → 1.0 progress through the current period, clamped."""
        if self.duration_seconds <= 0:
            return 0.0
        elapsed = self.duration_seconds - self.remaining_seconds
        return max(0.0, min(1.0, elapsed / self.duration_seconds))

    @property
    def cycle_position(self) -> int:
        """Focus periods completed in the current cycle."""
        return self.completed_focus_periods % self.cycles_until_long_break


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Focus/break timer state machine with session statistics.

    Signals
    -------
    tick_elapsed(remaining_seconds: int)
        Emitted after every tick that counted down.
    running_changed(is_running: bool)
        Emitted whenever the run flag flips.
    mode_changed(mode: Mode)
        Emitted after an automatic or manual mode change.
    period_completed(mode: Mode)
        Emitted when a period runs out, carrying the mode that ended.
    settings_changed(settings: Settings)
        Emitted after ``update_settings`` stores new values.
    state_changed(snapshot: TimerSnapshot)
        Emitted after every mutation.
    """

    tick_elapsed = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    mode_changed = pyqtSignal(object)
    period_completed = pyqtSignal(object)
    settings_changed = pyqtSignal(object)
    state_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: Settings | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._settings: Settings = coerce_settings(settings or Settings())
        self._notifier: Notifier | None = notifier

        # ── session state ─────────────────────────────────────────────
        self._mode: Mode = Mode.FOCUS
        self._remaining: int = self._settings.duration_seconds(Mode.FOCUS)
        self._running: bool = False

        # ── statistics ────────────────────────────────────────────────
        self._completed_focus: int = 0
        self._total_focus_seconds: int = 0

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def remaining_seconds(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def completed_focus_periods(self) -> int:
        return self._completed_focus

    @property
    def total_focus_seconds(self) -> int:
        """Seconds counted down while running in FOCUS."""
        return self._total_focus_seconds

    @property
    def duration_seconds(self) -> int:
        """Configured length of the active mode under current settings."""
        return self._settings.duration_seconds(self._mode)

    @property
    def progress_fraction(self) -> float:
        """Unclamped progress; may leave [0, 1] after shrinking a duration."""
        duration = self.duration_seconds
        return (duration - self._remaining) / duration

    @property
    def settings(self) -> Settings:
        return self.get_settings()

    @property
    def notifier(self) -> Notifier | None:
        return self._notifier

    @notifier.setter
    def notifier(self, value: Notifier | None) -> None:
        self._notifier = value

    def get_settings(self) -> Settings:
        """A copy of the current settings."""
        return coerce_settings(self._settings)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            mode=self._mode,
            remaining_seconds=self._remaining,
            is_running=self._running,
            completed_focus_periods=self._completed_focus,
            total_focus_seconds=self._total_focus_seconds,
            duration_seconds=self.duration_seconds,
            cycles_until_long_break=self._settings.cycles_until_long_break,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start counting down.  No-op when already running."""
        if self._running:
            return
        if self._remaining <= 0:
            logger.warning("start() ignored: no time remaining in %s", self._mode.value)
            return
        logger.debug("Started %s with %ss remaining", self._mode.value, self._remaining)
        self._set_running(True)
        self._emit_state()

    def pause(self) -> None:
        """Stop counting down.  Idempotent."""
        if not self._running:
            return
        logger.debug("Paused %s with %ss remaining", self._mode.value, self._remaining)
        self._set_running(False)
        self._emit_state()

    def toggle(self) -> None:
        """Play/pause button."""
        if self._running:
            self.pause()
        else:
            self.start()

    def tick(self) -> None:
        """Advance the countdown by one second.  No-op while idle."""
        if not self._running:
            return

        if self._mode is Mode.FOCUS:
            self._total_focus_seconds += 1

        if self._remaining > 1:
            self._remaining -= 1
            self.tick_elapsed.emit(self._remaining)
            self._emit_state()
        else:
            self._complete_current_period()

    def reset(self) -> None:
        """Refill the current mode's countdown.  Mode and counters stay."""
        self._set_running(False)
        self._remaining = self._settings.duration_seconds(self._mode)
        logger.debug("Reset %s to %ss", self._mode.value, self._remaining)
        self._emit_state()

    def switch_mode(self, target: Mode | str) -> None:
        """Jump to *target* with a full countdown.  No credit is recorded."""
        target = Mode.parse(target)
        self._set_running(False)
        self._transition_to(target)
        logger.info("Switched to %s (%ss)", target.value, self._remaining)
        self._emit_state()

    def update_settings(
        self, changes: Mapping[str, Any] | Settings | None = None, **kwargs: Any
    ) -> Settings:
        """Store new settings without touching the active countdown.

        Follow with ``switch_mode(engine.mode)`` to reseed the countdown
        from the new durations, or use :meth:`apply_settings`.
        """
        merged: dict[str, Any] = {}
        if isinstance(changes, Settings):
            merged.update(changes.to_dict())
        elif changes:
            merged.update(changes)
        merged.update(kwargs)

        self._settings = coerce_settings(self._settings, merged)
        logger.debug("Settings updated: %s", self._settings)
        self.settings_changed.emit(self.get_settings())
        self._emit_state()
        return self.get_settings()

    def apply_settings(
        self, changes: Mapping[str, Any] | Settings | None = None, **kwargs: Any
    ) -> Settings:
        """Save settings and re-apply the current mode."""
        settings = self.update_settings(changes, **kwargs)
        self.switch_mode(self._mode)
        return settings

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _complete_current_period(self) -> None:
        ended = self._mode
        self._set_running(False)
        self._remaining = 0

        self._notify(ended)
        self.period_completed.emit(ended)

        if ended is Mode.FOCUS:
            self._completed_focus += 1
            if self._completed_focus % self._settings.cycles_until_long_break == 0:
                next_mode = Mode.LONG_BREAK
            else:
                next_mode = Mode.SHORT_BREAK
        else:
            next_mode = Mode.FOCUS

        self._transition_to(next_mode)
        logger.info(
            "%s complete (focus periods: %d), next: %s",
            ended.value,
            self._completed_focus,
            next_mode.value,
        )
        self._emit_state()

    def _transition_to(self, mode: Mode) -> None:
        changed = mode is not self._mode
        self._mode = mode
        self._remaining = self._settings.duration_seconds(mode)
        if changed:
            self.mode_changed.emit(mode)

    def _notify(self, ended: Mode) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier(ended)
        except Exception:
            logger.exception("Notifier failed for %s completion", ended.value)

    def _set_running(self, running: bool) -> None:
        if running == self._running:
            return
        self._running = running
        self.running_changed.emit(running)

    def _emit_state(self) -> None:
        self.state_changed.emit(self.snapshot())
