"""Unit abstraction shared by every quantity category.

A ``Unit`` is a tagged value rather than a class hierarchy: the
``category`` tag (a plain string such as ``"time"``) says which quantity
it measures and ``factor`` says how many base units (seconds, for time)
one of it is worth.  Two units are interchangeable iff their categories
match; converting across categories raises ``IncompatibleUnitsError``.

Conversion is split in two so that the primitive never depends on unit
identity:

- ``Unit.to_base(value)`` multiplies by the unit's own factor.
- ``convert_from_base(base_value, factor)`` divides by an arbitrary
  factor, which may come from a unit outside the registry.
"""
from __future__ import annotations

from dataclasses import dataclass

from scalgo.errors import IncompatibleUnitsError

# Category tags. Third-party categories pick their own strings.
TIME = "time"


def convert_from_base(base_value: float, factor: float) -> float:
    """Express ``base_value`` in a unit worth ``factor`` base units.

    Parameters
    ----------
    base_value:
        A value already expressed in the category's base unit.
    factor:
        Base units per target unit, e.g. ``3600`` to get hours out of
        seconds.

    Returns
    -------
    float
        ``base_value / factor``.
    """
    return base_value / factor


@dataclass(frozen=True, slots=True)
class Unit:
    """A unit of some quantity category.

    Parameters
    ----------
    category:
        The quantity category this unit measures, e.g. ``TIME``.
    name:
        Canonical singular name, e.g. ``"hour"``.
    factor:
        Number of base units in one of this unit.
    """

    category: str
    name: str
    factor: int

    def __str__(self) -> str:
        return self.name

    def to_base(self, value: float) -> float:
        """Convert ``value`` expressed in this unit to base units."""
        return value * self.factor

    def from_base(self, base_value: float) -> float:
        """Convert a base-unit value back into this unit."""
        return convert_from_base(base_value, self.factor)

    def is_compatible(self, other: "Unit") -> bool:
        """Return True if ``other`` measures the same quantity category."""
        return self.category == other.category

    def convert(self, value: float, target: "Unit") -> float:
        """Convert ``value`` from this unit into ``target``.

        Raises
        ------
        IncompatibleUnitsError
            If ``target`` belongs to a different category.
        """
        if not self.is_compatible(target):
            raise IncompatibleUnitsError(
                f"cannot convert {self.category} unit {self.name} "
                f"to {target.category} unit {target.name}"
            )
        return convert_from_base(self.to_base(value), target.factor)
