"""Tests for Settings defaults, durations, and coercion of edits."""

from __future__ import annotations

import logging

import pytest

from pomotimer.settings import Settings, coerce_settings
from pomotimer.timer.engine import Mode


# ═══════════════════════════════════════════════════════════════════════
#  DEFAULTS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_focus_minutes(self):
        assert Settings().focus_minutes == 25

    def test_short_break(self):
        assert Settings().short_break_minutes == 5

    def test_long_break(self):
        assert Settings().long_break_minutes == 15

    def test_cycles(self):
        assert Settings().cycles_until_long_break == 4

    def test_non_numeric_constructor_value_uses_default(self):
        assert Settings(short_break_minutes="soon").short_break_minutes == 5

    def test_to_dict(self):
        assert Settings().to_dict() == {
            "focus_minutes": 25,
            "short_break_minutes": 5,
            "long_break_minutes": 15,
            "cycles_until_long_break": 4,
        }


class TestDurations:
    @pytest.mark.parametrize(
        "mode, minutes",
        [(Mode.FOCUS, 25), (Mode.SHORT_BREAK, 5), (Mode.LONG_BREAK, 15)],
    )
    def test_duration_minutes(self, mode, minutes):
        assert Settings().duration_minutes(mode) == minutes

    def test_duration_seconds(self):
        assert Settings(long_break_minutes=20).duration_seconds(Mode.LONG_BREAK) == 1200

    def test_duration_accepts_mode_string(self):
        assert Settings().duration_minutes("shortBreak") == 5


# ═══════════════════════════════════════════════════════════════════════
#  COERCION
# ═══════════════════════════════════════════════════════════════════════


class TestCoerceSettings:
    def test_none_changes_returns_copy(self):
        prior = Settings(focus_minutes=30)
        result = coerce_settings(prior)
        assert result == prior
        assert result is not prior

    def test_partial_update(self):
        result = coerce_settings(Settings(), {"focus_minutes": 50})
        assert result == Settings(50, 5, 15, 4)

    def test_camel_case_aliases(self):
        result = coerce_settings(
            Settings(),
            {
                "focusMinutes": 45,
                "shortBreakMinutes": 10,
                "longBreakMinutes": 20,
                "cyclesUntilLongBreak": 3,
            },
        )
        assert result == Settings(45, 10, 20, 3)

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", True, [], float("nan")])
    def test_invalid_value_keeps_prior(self, raw):
        prior = Settings(focus_minutes=40)
        assert coerce_settings(prior, {"focus_minutes": raw}).focus_minutes == 40

    @pytest.mark.parametrize("raw", [0, -5, "0", "-2", 0.4])
    def test_non_positive_raised_to_one(self, raw):
        assert coerce_settings(Settings(), {"focus_minutes": raw}).focus_minutes == 1

    @pytest.mark.parametrize("raw, expected", [("10", 10), (" 7 ", 7), (12.9, 12), ("3.5", 3)])
    def test_numeric_values_truncated(self, raw, expected):
        assert coerce_settings(Settings(), {"long_break_minutes": raw}).long_break_minutes == expected

    def test_prior_is_not_mutated(self):
        prior = Settings()
        coerce_settings(prior, {"focus_minutes": 1})
        assert prior.focus_minutes == 25

    def test_unknown_key_ignored_and_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pomotimer.settings")
        result = coerce_settings(Settings(), {"volume": 70})
        assert result == Settings()
        assert "Ignoring unknown setting 'volume'" in caplog.text

    def test_settings_instance_as_changes(self):
        result = coerce_settings(Settings(), Settings(1, 2, 3, 4))
        assert result == Settings(1, 2, 3, 4)

    def test_never_holds_zero(self):
        result = coerce_settings(
            Settings(),
            {"focus_minutes": 0, "short_break_minutes": 0,
             "long_break_minutes": 0, "cycles_until_long_break": 0},
        )
        assert min(result.to_dict().values()) == 1


class TestModeSharing:
    def test_engine_and_settings_share_one_mode_enum(self):
        from pomotimer import modes, settings
        from pomotimer.timer import engine

        assert settings.Mode is modes.Mode
        assert engine.Mode is modes.Mode

    def test_settings_accept_mode_from_engine_module(self):
        from pomotimer.timer.engine import Mode as EngineMode

        assert Settings().duration_seconds(EngineMode.LONG_BREAK) == 900
