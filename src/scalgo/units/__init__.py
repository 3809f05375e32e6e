"""Units of measurement.

Exports the ``Unit`` value type, the category registry, and the built-in
time category.  Importing this package registers the time category.
"""
from __future__ import annotations

from scalgo.units.base import TIME, Unit, convert_from_base
from scalgo.units.registry import (
    CategoryAlreadyRegisteredError,
    CategoryNotFoundError,
    UnitCategoryRegistry,
    resolve_unit,
    unit_registry,
)
from scalgo.units.time import TIME_ALIASES, TimeUnits, new_time_unit

__all__ = [
    "TIME",
    "Unit",
    "convert_from_base",
    "UnitCategoryRegistry",
    "CategoryAlreadyRegisteredError",
    "CategoryNotFoundError",
    "unit_registry",
    "resolve_unit",
    "TIME_ALIASES",
    "TimeUnits",
    "new_time_unit",
]
