"""Unit tests for scalgo.units.registry — category registration, dispatch
order, resolution errors and entry-point loading.
"""
from __future__ import annotations

import importlib.metadata
import logging
from types import MappingProxyType
from unittest.mock import MagicMock, patch

import pytest

from scalgo.errors import UnitResolutionError
from scalgo.units import TIME, resolve_unit, unit_registry
from scalgo.units.base import Unit
from scalgo.units.registry import (
    CategoryAlreadyRegisteredError,
    CategoryNotFoundError,
    UnitCategoryRegistry,
)
from scalgo.units.time import HOUR, MINUTE, YEAR, new_time_unit

GRAM = Unit(category="mass", name="gram", factor=1)
KILOGRAM = Unit(category="mass", name="kilogram", factor=1000)
_MASS_ALIASES = MappingProxyType({"g": GRAM, "kg": KILOGRAM, "m": GRAM})


def new_mass_unit(text: str) -> Unit:
    unit = _MASS_ALIASES.get(text.strip().lower())
    if unit is None:
        raise UnitResolutionError(f"Unknown unit {text}")
    return unit


def _fresh_registry(name: str = "test") -> UnitCategoryRegistry:
    """Return a new empty registry for each test."""
    return UnitCategoryRegistry(name)


# ===========================================================================
# Default registry
# ===========================================================================


class TestDefaultRegistry:
    def test_time_is_registered(self) -> None:
        assert TIME in unit_registry

    def test_time_is_first_in_dispatch_order(self) -> None:
        assert unit_registry.list_categories()[0] == TIME

    def test_resolve_known_unit(self) -> None:
        assert resolve_unit("hours") == HOUR

    @pytest.mark.parametrize("spelling", ["YEARS", "years", "Years"])
    def test_resolve_is_case_insensitive(self, spelling: str) -> None:
        assert resolve_unit(spelling) == YEAR

    def test_empty_string_is_no_unit(self) -> None:
        assert resolve_unit("") is None

    def test_unknown_unit_message(self) -> None:
        with pytest.raises(UnitResolutionError) as exc_info:
            resolve_unit("invalid")
        assert str(exc_info.value) == "no matching unit found for invalid"

    def test_near_miss_fails(self) -> None:
        with pytest.raises(UnitResolutionError):
            resolve_unit("yearz")

    def test_trailing_punctuation_is_not_trimmed(self) -> None:
        with pytest.raises(UnitResolutionError):
            resolve_unit("years.")

    def test_whitespace_only_is_an_unknown_unit(self) -> None:
        with pytest.raises(UnitResolutionError):
            resolve_unit(" ")

    def test_unit_resolution_error_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            resolve_unit("furlongs")

    def test_time_aliases_exposed(self) -> None:
        assert unit_registry.aliases(TIME)["min"] == MINUTE


# ===========================================================================
# Registration
# ===========================================================================


class TestRegistration:
    def test_register_decorator_returns_function_unchanged(self) -> None:
        registry = _fresh_registry()
        decorated = registry.register("mass")(new_mass_unit)
        assert decorated is new_mass_unit
        assert "mass" in registry

    def test_register_parser_directly(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit, _MASS_ALIASES)
        assert registry.get("mass") is new_mass_unit
        assert registry.aliases("mass")["kg"] == KILOGRAM

    def test_aliases_default_to_empty(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit)
        assert dict(registry.aliases("mass")) == {}

    def test_duplicate_registration_raises(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit)
        with pytest.raises(CategoryAlreadyRegisteredError):
            registry.register_parser("mass", new_mass_unit)

    def test_duplicate_error_is_value_error(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit)
        with pytest.raises(ValueError):
            registry.register_parser("mass", new_mass_unit)

    def test_non_callable_rejected(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register_parser("mass", "not callable")  # type: ignore[arg-type]

    def test_deregister(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit)
        registry.deregister("mass")
        assert "mass" not in registry
        assert len(registry) == 0

    def test_deregister_unknown_raises(self) -> None:
        with pytest.raises(CategoryNotFoundError):
            _fresh_registry().deregister("mass")

    def test_get_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            _fresh_registry().get("mass")

    def test_aliases_unknown_raises(self) -> None:
        with pytest.raises(CategoryNotFoundError):
            _fresh_registry().aliases("mass")

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry("logged")
        with caplog.at_level(logging.DEBUG, logger="scalgo.units.registry"):
            registry.register_parser("mass", new_mass_unit)
        assert "mass" in caplog.text

    def test_repr_lists_categories(self) -> None:
        registry = _fresh_registry("demo")
        registry.register_parser("mass", new_mass_unit)
        assert repr(registry) == "UnitCategoryRegistry(name='demo', categories=['mass'])"


# ===========================================================================
# Dispatch
# ===========================================================================


class TestDispatch:
    def test_first_matching_category_wins(self) -> None:
        registry = _fresh_registry()
        registry.register_parser(TIME, new_time_unit)
        registry.register_parser("mass", new_mass_unit)
        # "m" is both minute and (in this test table) gram
        assert registry.resolve("m") == MINUTE

    def test_later_category_used_when_earlier_fails(self) -> None:
        registry = _fresh_registry()
        registry.register_parser(TIME, new_time_unit)
        registry.register_parser("mass", new_mass_unit)
        assert registry.resolve("kg") == KILOGRAM

    def test_order_follows_registration(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit)
        registry.register_parser(TIME, new_time_unit)
        assert registry.list_categories() == ["mass", TIME]
        assert registry.resolve("m") == GRAM

    def test_empty_registry_rejects_everything(self) -> None:
        with pytest.raises(UnitResolutionError) as exc_info:
            _fresh_registry().resolve("s")
        assert str(exc_info.value) == "no matching unit found for s"

    def test_empty_string_short_circuits(self) -> None:
        parser = MagicMock()
        registry = _fresh_registry()
        registry.register_parser("spy", parser)
        assert registry.resolve("") is None
        parser.assert_not_called()


# ===========================================================================
# Entry-point loading
# ===========================================================================


def _entry_point(name: str, loaded: object = None, error: Exception | None = None) -> MagicMock:
    ep = MagicMock(spec=importlib.metadata.EntryPoint)
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


class TestLoadEntrypoints:
    def test_registers_loaded_parser(self) -> None:
        registry = _fresh_registry()
        with patch("importlib.metadata.entry_points", return_value=[_entry_point("mass", new_mass_unit)]):
            registry.load_entrypoints()
        assert registry.resolve("kg") == KILOGRAM

    def test_uses_scalgo_units_group_by_default(self) -> None:
        registry = _fresh_registry()
        with patch("importlib.metadata.entry_points", return_value=[]) as mock_eps:
            registry.load_entrypoints()
        mock_eps.assert_called_once_with(group="scalgo.units")

    def test_already_registered_is_skipped(self) -> None:
        registry = _fresh_registry()
        registry.register_parser("mass", new_mass_unit)
        ep = _entry_point("mass", new_mass_unit)
        with patch("importlib.metadata.entry_points", return_value=[ep]):
            registry.load_entrypoints()
        ep.load.assert_not_called()

    def test_failed_import_is_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        ep = _entry_point("broken", error=ImportError("no module"))
        with patch("importlib.metadata.entry_points", return_value=[ep]):
            with caplog.at_level(logging.ERROR, logger="scalgo.units.registry"):
                registry.load_entrypoints()
        assert "broken" not in registry
        assert "Failed to load entry-point" in caplog.text

    def test_non_callable_is_skipped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        ep = _entry_point("odd", loaded=42)
        with patch("importlib.metadata.entry_points", return_value=[ep]):
            with caplog.at_level(logging.WARNING, logger="scalgo.units.registry"):
                registry.load_entrypoints()
        assert "odd" not in registry
        assert "could not be registered" in caplog.text
