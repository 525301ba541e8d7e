"""Timer settings and coercion of user edits.

Settings live only for the lifetime of the running session; nothing is
written to disk.

Usage::

    settings = Settings()
    settings = coerce_settings(settings, {"focusMinutes": "50"})
    settings.focus_minutes  # 50
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, asdict, fields
from typing import Any

from .modes import Mode

logger = logging.getLogger(__name__)


# ── defaults ──────────────────────────────────────────────────────────────

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_CYCLES_UNTIL_LONG_BREAK = 4

MIN_VALUE = 1

# camelCase names used by host UIs
_ALIASES: dict[str, str] = {
    "focusMinutes": "focus_minutes",
    "shortBreakMinutes": "short_break_minutes",
    "longBreakMinutes": "long_break_minutes",
    "cyclesUntilLongBreak": "cycles_until_long_break",
}


@dataclass
class Settings:
    """Durations (minutes) and the long-break cycle length."""

    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    short_break_minutes: int = DEFAULT_SHORT_BREAK_MINUTES
    long_break_minutes: int = DEFAULT_LONG_BREAK_MINUTES
    cycles_until_long_break: int = DEFAULT_CYCLES_UNTIL_LONG_BREAK

    def __post_init__(self) -> None:
        # Invalid constructor arguments fall back to the hardcoded defaults.
        for f in fields(self):
            value = _coerce_value(getattr(self, f.name))
            if value is None:
                value = f.default
            setattr(self, f.name, value)

    def duration_minutes(self, mode: Mode | str) -> int:
        """Configured minutes for *mode*."""
        mode = Mode.parse(mode)
        if mode is Mode.FOCUS:
            return self.focus_minutes
        if mode is Mode.SHORT_BREAK:
            return self.short_break_minutes
        return self.long_break_minutes

    def duration_seconds(self, mode: Mode | str) -> int:
        return self.duration_minutes(mode) * 60

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


# ── coercion ──────────────────────────────────────────────────────────────


def _coerce_value(value: Any) -> int | None:
    """Return *value* as an int >= 1, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            number = float(value)
        except ValueError:
            return None
    elif isinstance(value, (int, float)):
        number = value
    else:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return max(MIN_VALUE, int(number))


def coerce_settings(
    prior: Settings,
    changes: Mapping[str, Any] | Settings | None = None,
) -> Settings:
    """Merge *changes* onto *prior*, coercing every field to an int >= 1.

    Missing, empty or non-numeric values keep the prior value for that
    field.  Numeric values below 1 become 1.
    """
    if changes is None:
        return Settings(**prior.to_dict())
    if isinstance(changes, Settings):
        changes = changes.to_dict()

    merged = prior.to_dict()
    for key, raw in changes.items():
        name = _ALIASES.get(key, key)
        if name not in merged:
            logger.debug("Ignoring unknown setting %r", key)
            continue
        value = _coerce_value(raw)
        if value is None:
            logger.debug(
                "Invalid value %r for %s, keeping %s", raw, name, merged[name]
            )
            continue
        merged[name] = value
    return Settings(**merged)
