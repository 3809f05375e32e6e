"""Enlistment serialization to and from JSON and YAML.

The serialized form is a plain dict/list structure that maps naturally
to both formats.  Units are written out in full (category, name and
factor) so a document can be restored without consulting the registry,
and the reference record is written as its index.

Usage
-----
::

    from scalgo.model.serializer import EnlistmentSerializer

    serializer = EnlistmentSerializer()
    data = serializer.to_dict(enlistment)
    yaml_text = serializer.to_yaml(enlistment)
    restored = serializer.from_yaml(yaml_text)
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from scalgo.model.enlistment import Enlistment
from scalgo.model.record import Record
from scalgo.settings import EnlistmentSettings
from scalgo.units import Unit


class EnlistmentSerializer:
    """Converts between ``Enlistment`` objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (Enlistment → dict)
    # ------------------------------------------------------------------

    def to_dict(self, enlistment: Enlistment) -> dict[str, object]:
        """Serialize an ``Enlistment`` to a JSON-compatible dict."""
        ref = enlistment.ref_record
        records = enlistment.records
        ref_index = None
        if ref is not None:
            ref_index = next(i for i, record in enumerate(records) if record is ref)
        return {
            "kind": "Enlistment",
            "settings": {
                "scale_unit": self._unit_to_dict(enlistment.scale_unit),
                "sorted": enlistment.sorted,
                "reversed": enlistment.reversed,
            },
            "ref_index": ref_index,
            "records": [self._record_to_dict(r) for r in records],
        }

    def _unit_to_dict(self, unit: Unit | None) -> dict[str, object] | None:
        if unit is None:
            return None
        return {"category": unit.category, "name": unit.name, "factor": unit.factor}

    def _record_to_dict(self, record: Record) -> dict[str, object]:
        return {
            "label": record.label,
            "value": record.value,
            "base_value": record.base_value,
            "unit": self._unit_to_dict(record.unit),
        }

    def to_json(self, enlistment: Enlistment, indent: int | None = 2) -> str:
        """Serialize an ``Enlistment`` to a JSON string."""
        return json.dumps(self.to_dict(enlistment), indent=indent)

    def to_yaml(self, enlistment: Enlistment) -> str:
        """Serialize an ``Enlistment`` to a YAML string."""
        return yaml.safe_dump(self.to_dict(enlistment), sort_keys=False, allow_unicode=True)

    # ------------------------------------------------------------------
    # Deserialization (dict → Enlistment)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, Any]) -> Enlistment:
        """Deserialize an ``Enlistment`` from a dict.

        Raises
        ------
        ValueError
            If ``data`` is not an enlistment document.
        """
        if data.get("kind") != "Enlistment":
            raise ValueError(f"Expected kind 'Enlistment', got {data.get('kind')!r}")
        raw_settings = data.get("settings") or {}
        settings = EnlistmentSettings(
            scale_unit=self._unit_from_dict(raw_settings.get("scale_unit")),
            sorted=bool(raw_settings.get("sorted", True)),
            reversed=bool(raw_settings.get("reversed", False)),
        )
        records = [self._record_from_dict(r) for r in data.get("records", [])]
        enlistment = Enlistment(records, settings)
        ref_index = data.get("ref_index")
        if ref_index is not None:
            enlistment.set_ref_record(enlistment.records[int(ref_index)])
        return enlistment

    def _unit_from_dict(self, d: dict[str, Any] | None) -> Unit | None:
        if d is None:
            return None
        return Unit(category=str(d["category"]), name=str(d["name"]), factor=int(d["factor"]))

    def _record_from_dict(self, d: dict[str, Any]) -> Record:
        return Record(
            label=str(d["label"]),
            base_value=float(d["base_value"]),
            unit=self._unit_from_dict(d.get("unit")),
        )

    def from_json(self, text: str) -> Enlistment:
        """Deserialize an ``Enlistment`` from a JSON string."""
        return self.from_dict(json.loads(text))

    def from_yaml(self, text: str) -> Enlistment:
        """Deserialize an ``Enlistment`` from a YAML string."""
        return self.from_dict(yaml.safe_load(text))
