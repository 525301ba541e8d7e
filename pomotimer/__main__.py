"""Run a terminal timer session: python -m pomotimer."""

from __future__ import annotations

import argparse
import logging
import signal
import sys

from PyQt6.QtCore import QCoreApplication, QTimer

from .audio.notifier import CompletionNotifier
from .console import ConsoleSession
from .settings import Settings
from .timer.scheduler import TICK_INTERVAL_MS

# Python signal handlers only run when Qt hands control back to Python.
SIGNAL_POLL_MS = 200


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomotimer")


def build_parser() -> argparse.ArgumentParser:
    defaults = Settings()
    parser = argparse.ArgumentParser(
        prog="pomotimer", description="Focus/break timer in the terminal."
    )
    parser.add_argument("--focus", type=int, default=defaults.focus_minutes,
                        help="focus minutes (default: %(default)s)")
    parser.add_argument("--short-break", type=int, default=defaults.short_break_minutes,
                        help="short break minutes (default: %(default)s)")
    parser.add_argument("--long-break", type=int, default=defaults.long_break_minutes,
                        help="long break minutes (default: %(default)s)")
    parser.add_argument("--cycles", type=int, default=defaults.cycles_until_long_break,
                        help="focus periods before a long break (default: %(default)s)")
    parser.add_argument("--mute", action="store_true", help="no completion sound")
    parser.add_argument("--auto-start", action="store_true",
                        help="keep cycling until Ctrl+C instead of exiting after one period")
    parser.add_argument("--interval-ms", type=int, default=TICK_INTERVAL_MS,
                        help=argparse.SUPPRESS)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    app = QCoreApplication(sys.argv[:1])
    app.setApplicationName("pomotimer")

    settings = Settings(
        focus_minutes=args.focus,
        short_break_minutes=args.short_break,
        long_break_minutes=args.long_break,
        cycles_until_long_break=args.cycles,
    )
    session = ConsoleSession(
        settings=settings,
        notifier=CompletionNotifier(enabled=not args.mute),
        auto_start_breaks=args.auto_start,
        auto_start_focus=args.auto_start,
        interval_ms=args.interval_ms,
    )

    # Let Ctrl+C end the Qt event loop.
    signal.signal(signal.SIGINT, lambda *_: app.quit())
    signal_poll = QTimer()
    signal_poll.setInterval(SIGNAL_POLL_MS)
    signal_poll.timeout.connect(lambda: None)
    signal_poll.start()

    # Without auto-start there is nothing left to count once a period ends.
    session.idle.connect(lambda _snap: app.quit())

    session.start()
    logger.info("Session started with %s", settings)
    code = app.exec()
    signal_poll.stop()
    session.stop()
    snap = session.engine.snapshot()
    print(
        f"\nFocus periods: {snap.completed_focus_periods}, "
        f"focused {snap.total_focus_seconds // 60} min"
    )
    return code


if __name__ == "__main__":
    sys.exit(main())
