"""Unit tests for scalgo.settings — directive parsing and application."""
from __future__ import annotations

import pytest

from scalgo.errors import SettingError, UnitResolutionError
from scalgo.settings import EnlistmentSettings, apply_directive, split_directive
from scalgo.units.time import DAY, HOUR


class TestDefaults:
    def test_default_settings(self) -> None:
        settings = EnlistmentSettings()
        assert settings.scale_unit is None
        assert settings.sorted is True
        assert settings.reversed is False

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            EnlistmentSettings().sorted = False  # type: ignore[misc]


class TestSplitDirective:
    @pytest.mark.parametrize("text, expected", [
        ("@scale day", ("@scale", "day")),
        ("@sorted false", ("@sorted", "false")),
        ("@reverse", ("@reverse", "")),
        ("@sorted true ", ("@sorted", "true ")),
        ("@scale  day", ("@scale", " day")),
    ])
    def test_splits_on_first_space(self, text: str, expected: tuple[str, str]) -> None:
        assert split_directive(text) == expected


class TestApplyDirective:
    def test_scale(self) -> None:
        assert apply_directive(EnlistmentSettings(), "@scale day").scale_unit == DAY

    def test_scale_uses_aliases(self) -> None:
        assert apply_directive(EnlistmentSettings(), "@scale hr").scale_unit == HOUR

    def test_scale_unknown_unit_propagates_unwrapped(self) -> None:
        with pytest.raises(UnitResolutionError) as exc_info:
            apply_directive(EnlistmentSettings(), "@scale fortnights")
        assert str(exc_info.value) == "no matching unit found for fortnights"

    def test_scale_without_value_clears_unit(self) -> None:
        settings = EnlistmentSettings(scale_unit=DAY)
        assert apply_directive(settings, "@scale").scale_unit is None

    @pytest.mark.parametrize("value, expected", [
        ("true", True),
        ("false", False),
        ("True", False),
        ("1", False),
        ("yes", False),
        ("", False),
    ])
    def test_sorted_accepts_only_exact_true(self, value: str, expected: bool) -> None:
        text = f"@sorted {value}" if value else "@sorted"
        assert apply_directive(EnlistmentSettings(), text).sorted is expected

    @pytest.mark.parametrize("value, expected", [
        ("true", True),
        ("TRUE", False),
        ("false", False),
    ])
    def test_reverse_accepts_only_exact_true(self, value: str, expected: bool) -> None:
        assert apply_directive(EnlistmentSettings(), f"@reverse {value}").reversed is expected

    def test_trailing_space_is_not_true(self) -> None:
        assert apply_directive(EnlistmentSettings(), "@sorted true ").sorted is False

    def test_input_settings_untouched(self) -> None:
        settings = EnlistmentSettings()
        apply_directive(settings, "@reverse true")
        assert settings.reversed is False

    def test_later_directive_wins(self) -> None:
        settings = apply_directive(EnlistmentSettings(), "@scale day")
        settings = apply_directive(settings, "@scale hour")
        assert settings.scale_unit == HOUR

    def test_unknown_directive(self) -> None:
        with pytest.raises(SettingError) as exc_info:
            apply_directive(EnlistmentSettings(), "@unknown_setting")
        assert str(exc_info.value) == "Unknown setting @unknown_setting"

    def test_unknown_directive_message_keeps_whole_line(self) -> None:
        with pytest.raises(SettingError, match="^Unknown setting @colour blue$"):
            apply_directive(EnlistmentSettings(), "@colour blue")

    def test_directive_names_are_case_sensitive(self) -> None:
        with pytest.raises(SettingError):
            apply_directive(EnlistmentSettings(), "@Scale day")
