"""Record: a single labeled measurement normalized to base units."""
from __future__ import annotations

from dataclasses import dataclass

from scalgo.errors import IncompatibleUnitsError, UnitResolutionError
from scalgo.lexer.lexer import split_data_line
from scalgo.units import Unit, convert_from_base, resolve_unit


@dataclass(frozen=True, slots=True)
class Record:
    """A labeled value expressed in its category's base unit.

    Parameters
    ----------
    label:
        Free-text label, non-empty.
    base_value:
        The original value multiplied by the unit factor.  For a record
        without a unit this is the raw value.
    unit:
        The unit the value was written in, or ``None``.
    """

    label: str
    base_value: float
    unit: Unit | None = None

    def __repr__(self) -> str:
        unit = self.unit.name if self.unit is not None else "-"
        return f"Record({self.label!r}, {self.base_value!r}, {unit})"

    @classmethod
    def create(cls, label: str, value: float, unit_text: str) -> "Record":
        """Build a record from a value written in the unit ``unit_text``.

        Raises
        ------
        UnitResolutionError
            ``"failed to create record: <cause>"`` if ``unit_text`` is
            non-empty and not a known unit.
        """
        try:
            unit = resolve_unit(unit_text)
        except UnitResolutionError as exc:
            raise UnitResolutionError(f"failed to create record: {exc}") from exc
        base_value = unit.to_base(value) if unit is not None else value
        return cls(label=label, base_value=base_value, unit=unit)

    @classmethod
    def from_line(cls, text: str) -> "Record":
        """Parse a data line such as ``"Label 1: 3.14 years"``."""
        label, value, unit_text = split_data_line(text)
        return cls.create(label, value, unit_text)

    @property
    def value(self) -> float:
        """The value in the unit it was written in."""
        if self.unit is None:
            return self.base_value
        return self.unit.from_base(self.base_value)

    def value_in(self, target: Unit | None) -> float:
        """Return the value expressed in ``target``.

        A ``None`` target returns the base value.  Unitless records are
        treated as already being in base units.

        Raises
        ------
        IncompatibleUnitsError
            If the record's unit and ``target`` are of different categories.
        """
        if target is None:
            return self.base_value
        if self.unit is not None and not self.unit.is_compatible(target):
            raise IncompatibleUnitsError(
                f"cannot express {self.label!r} ({self.unit.category}) "
                f"in {target.category} unit {target.name}"
            )
        return convert_from_base(self.base_value, target.factor)
