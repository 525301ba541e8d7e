"""QTimer-backed tick driver.

The engine never measures time itself.  ``TickScheduler`` supplies
``engine.tick()`` about once a second, but only while the engine reports
that it is running::

    scheduler = TickScheduler(parent=self)
    scheduler.attach(engine)
    engine.start()   # timer starts
    engine.pause()   # timer stops
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer

from .engine import TimerEngine

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickScheduler(QObject):
    """Starts and stops a 1 Hz ``QTimer`` in step with an engine."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine: TimerEngine | None = None
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(max(1, interval_ms))
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def engine(self) -> TimerEngine | None:
        return self._engine

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @interval_ms.setter
    def interval_ms(self, value: int) -> None:
        self._qt_timer.setInterval(max(1, value))

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def attach(self, engine: TimerEngine) -> None:
        """Follow *engine*'s run flag.  Replaces any previous engine."""
        self.detach()
        self._engine = engine
        engine.running_changed.connect(self._on_running_changed)
        if engine.is_running:
            self._qt_timer.start()

    def detach(self) -> None:
        self._qt_timer.stop()
        if self._engine is None:
            return
        try:
            self._engine.running_changed.disconnect(self._on_running_changed)
        except TypeError:
            logger.debug("running_changed was already disconnected")
        self._engine = None

    # ── internal ──────────────────────────────────────────────────────

    def _on_running_changed(self, running: bool) -> None:
        if running:
            self._qt_timer.start()
        else:
            self._qt_timer.stop()

    def _on_timeout(self) -> None:
        if self._engine is None or not self._engine.is_running:
            self._qt_timer.stop()
            return
        self._engine.tick()
