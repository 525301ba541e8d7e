"""Completion notifier.

The engine calls its notifier once per finished period.  Whether a sound
actually plays is decided here, so the host can mute notifications
without touching the engine.

Usage::

    notifier = CompletionNotifier(parent=self)
    engine = TimerEngine(notifier=notifier)
    notifier.set_enabled(False)   # mute
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QCoreApplication, QObject, pyqtSignal
from PyQt6.QtWidgets import QApplication

logger = logging.getLogger(__name__)


def system_beep() -> None:
    """Platform beep for GUI apps, terminal bell otherwise."""
    if isinstance(QCoreApplication.instance(), QApplication):
        QApplication.beep()
        return
    sys.stdout.write("\a")
    sys.stdout.flush()


class CompletionNotifier(QObject):
    """Callable notifier with an on/off switch.

    Signals
    -------
    notified(mode)
        Emitted for every completion that was not muted.
    """

    notified = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        player: Callable[[], Any] | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._player = player or system_beep
        self._enabled = enabled

    # ── public API ────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)
        logger.debug("Completion sound %s", "on" if self._enabled else "off")

    def toggle(self) -> bool:
        """Flip the mute switch and return the new state."""
        self.set_enabled(not self._enabled)
        return self._enabled

    def __call__(self, mode: Any = None) -> None:
        if not self._enabled:
            return
        self._player()
        self.notified.emit(mode)
