"""Audio package."""

from .notifier import CompletionNotifier, system_beep

__all__ = ["CompletionNotifier", "system_beep"]
