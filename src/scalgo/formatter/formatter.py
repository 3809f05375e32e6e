"""Canonical formatter: Enlistment → scalgo document text.

The ``EnlistmentFormatter`` renders an enlistment as a canonical document:

- directives first, in ``DIRECTIVE_ORDER``, and only when they differ
  from the defaults (``@scale`` whenever a scale unit is set)
- one ``Label: value unit`` line per record, in current record order
- labels starting with ``#`` or ``@`` get one leading space so they
  read back as data lines
- values in the unit each record was written in, with up to 15
  significant digits
- comments and blank lines are not preserved (the formatter works from
  the parsed model)

Parsing the output yields an enlistment with the same records, order,
reference record and settings.  An explicitly pinned reference record
is the exception: the text format has no directive for it.

Usage
-----
::

    from scalgo.formatter import EnlistmentFormatter
    from scalgo.parser import parse

    canonical = EnlistmentFormatter().format(parse(source))
"""
from __future__ import annotations

from scalgo.grammar.grammar import DIRECTIVE_ORDER
from scalgo.grammar.tokens import COMMENT_PREFIX, DIRECTIVE_PREFIX
from scalgo.model.enlistment import Enlistment
from scalgo.model.record import Record


def format_number(value: float) -> str:
    """Render ``value`` so that ``float()`` reads it back unchanged in practice."""
    return f"{value:.15g}"


class EnlistmentFormatter:
    """Produces canonical document text from an ``Enlistment``."""

    def format(self, enlistment: Enlistment) -> str:
        """Return the canonical text of ``enlistment``, ending with a newline."""
        lines = self._directive_lines(enlistment)
        lines.extend(self._record_line(record) for record in enlistment.records)
        return "\n".join(lines) + "\n"

    def _directive_lines(self, enlistment: Enlistment) -> list[str]:
        values: dict[str, str | None] = {
            "@scale": enlistment.scale_unit.name if enlistment.scale_unit is not None else None,
            "@sorted": None if enlistment.sorted else "false",
            "@reverse": "true" if enlistment.reversed else None,
        }
        return [f"{name} {values[name]}" for name in DIRECTIVE_ORDER if values[name] is not None]

    def _record_line(self, record: Record) -> str:
        label = record.label
        # Labels are trimmed on read; a leading space keeps the line data.
        if label.startswith((COMMENT_PREFIX, DIRECTIVE_PREFIX)):
            label = " " + label
        line = f"{label}: {format_number(record.value)}"
        if record.unit is not None:
            line += f" {record.unit.name}"
        return line


def format_enlistment(enlistment: Enlistment) -> str:
    """Format ``enlistment`` with a default ``EnlistmentFormatter``."""
    return EnlistmentFormatter().format(enlistment)
