"""scalgo data model.

Exports the ``Record`` and ``Enlistment`` types, the shared record
comparator, and the serializer for converting enlistments to and from
JSON/YAML.
"""
from __future__ import annotations

from scalgo.model.enlistment import Enlistment, compare_records
from scalgo.model.record import Record
from scalgo.model.serializer import EnlistmentSerializer

__all__ = [
    "Record",
    "Enlistment",
    "compare_records",
    "EnlistmentSerializer",
]
