"""Enlistment: the parsed document as an ordered collection of records.

An enlistment owns its records, its ``EnlistmentSettings`` and the
reference record.  The reference is stored as an index into the record
list and is always one of the records by identity.

Ordering
--------
``compare_records`` is the single comparator behind both sorting and the
reference scan: ascending by base value, descending when ``reversed``.

- When sorted, the reference is ``records[0]``, the first record in
  comparator order.
- When unsorted, a linear scan picks the record that compares greatest,
  i.e. the maximum base value (the minimum when ``reversed``).  The scan
  only replaces its candidate on a strictly greater comparison, so the
  first of several equal records wins.

Finalize
--------
``finalize`` runs once the document has been read: it rejects an empty
enlistment, sorts if configured, fixes the reference record and defaults
the scale unit to the reference record's unit.  Running it again changes
nothing.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from functools import cmp_to_key

from scalgo.errors import EmptyDocumentError
from scalgo.model.record import Record
from scalgo.settings import EnlistmentSettings, apply_directive
from scalgo.units import Unit

logger = logging.getLogger(__name__)


def compare_records(a: Record, b: Record, reversed: bool = False) -> int:
    """Three-way compare two records by base value.

    Returns a negative number if ``a`` orders before ``b``, zero if they
    tie, positive otherwise.  ``reversed`` flips the direction.
    """
    result = (a.base_value > b.base_value) - (a.base_value < b.base_value)
    return -result if reversed else result


class Enlistment:
    """Ordered records plus scale, sort and reverse configuration.

    Parameters
    ----------
    records:
        Initial records, in input order.
    settings:
        Initial settings; defaults to sorted, ascending, no scale unit.
    """

    def __init__(
        self,
        records: Iterable[Record] = (),
        settings: EnlistmentSettings | None = None,
    ) -> None:
        self._records: list[Record] = list(records)
        self._settings: EnlistmentSettings = settings or EnlistmentSettings()
        self._ref_index: int | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[Record, ...]:
        """The records in their current order."""
        return tuple(self._records)

    @property
    def settings(self) -> EnlistmentSettings:
        return self._settings

    @property
    def scale_unit(self) -> Unit | None:
        return self._settings.scale_unit

    @scale_unit.setter
    def scale_unit(self, unit: Unit | None) -> None:
        self._settings = replace(self._settings, scale_unit=unit)

    @property
    def sorted(self) -> bool:
        return self._settings.sorted

    @sorted.setter
    def sorted(self, flag: bool) -> None:
        self._settings = replace(self._settings, sorted=flag)

    @property
    def reversed(self) -> bool:
        return self._settings.reversed

    @reversed.setter
    def reversed(self, flag: bool) -> None:
        self._settings = replace(self._settings, reversed=flag)

    @property
    def ref_record(self) -> Record | None:
        """The reference record, or ``None`` before finalize."""
        if self._ref_index is None:
            return None
        return self._records[self._ref_index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        ref = self.ref_record.label if self.ref_record is not None else None
        return (
            f"Enlistment(records={len(self._records)}, ref={ref!r}, "
            f"scale={self.scale_unit}, sorted={self.sorted}, reversed={self.reversed})"
        )

    # ------------------------------------------------------------------
    # Mutation while reading
    # ------------------------------------------------------------------

    def append(self, record: Record) -> None:
        """Add ``record`` after the existing records."""
        self._records.append(record)

    def apply_setting(self, text: str) -> None:
        """Apply a directive line such as ``"@reverse true"``."""
        self._settings = apply_directive(self._settings, text)

    def set_ref_record(self, record: Record) -> None:
        """Pin ``record`` as the reference record.

        Raises
        ------
        ValueError
            If ``record`` is not one of this enlistment's records.
        """
        self._ref_index = self._index_of(record)

    def _index_of(self, record: Record) -> int:
        for index, candidate in enumerate(self._records):
            if candidate is record:
                return index
        raise ValueError(f"{record!r} is not a record of this enlistment")

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def sort_records(self) -> None:
        """Stable-sort records by base value and mark the enlistment sorted."""
        ref = self.ref_record
        flip = self.reversed
        self._records.sort(key=cmp_to_key(lambda a, b: compare_records(a, b, flip)))
        if ref is not None:
            self._ref_index = self._index_of(ref)
        self.sorted = True

    def find_ref_record(self) -> Record:
        """Return the reference record under the current configuration.

        Raises
        ------
        EmptyDocumentError
            If there are no records.
        """
        if self._ref_index is not None:
            return self._records[self._ref_index]
        if not self._records:
            raise EmptyDocumentError()
        if self.sorted:
            return self._records[0]
        best = self._records[0]
        for record in self._records[1:]:
            if compare_records(record, best, self.reversed) > 0:
                best = record
        return best

    def finalize(self) -> "Enlistment":
        """Sort if configured, fix the reference record and the scale unit.

        Returns
        -------
        Enlistment
            ``self``, for chaining.

        Raises
        ------
        EmptyDocumentError
            If there are no records.
        """
        if not self._records:
            raise EmptyDocumentError()
        if self.sorted:
            self.sort_records()
        ref = self.find_ref_record()
        self._ref_index = self._index_of(ref)
        if self.scale_unit is None:
            self.scale_unit = ref.unit
        logger.debug(
            "Finalized %d record(s): ref=%r scale=%s sorted=%s reversed=%s",
            len(self._records),
            ref.label,
            self.scale_unit,
            self.sorted,
            self.reversed,
        )
        return self

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def scaled_values(self) -> list[tuple[Record, float]]:
        """Return ``(record, value)`` pairs with values in the scale unit."""
        return [(record, record.value_in(self.scale_unit)) for record in self._records]
