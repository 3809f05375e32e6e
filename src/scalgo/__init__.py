"""scalgo — parse labeled, unit-tagged measurements and put them on one scale.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import scalgo

    enlistment = scalgo.parse('''
    # how long things take
    @scale day
    Label 1: 3.14 years
    Label 2: 42 days
    Label 3: 1.5 hours
    ''')

    [r.label for r in enlistment.records]   # sorted by duration
    enlistment.ref_record.label             # 'Label 3'
    enlistment.scale_unit.name              # 'day'

    # From a file
    enlistment = scalgo.load("durations.txt")

    # Canonical text
    text = scalgo.format(enlistment)

    scalgo.__version__
    '0.1.0'
"""
from __future__ import annotations

import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from scalgo.model.enlistment import Enlistment
    from scalgo.units.base import Unit


def parse(source: str) -> "Enlistment":
    """Parse a scalgo document held in a string.

    Parameters
    ----------
    source:
        Complete document text.

    Returns
    -------
    Enlistment
        The finalized enlistment.

    Raises
    ------
    scalgo.errors.ScalgoError
        On any grammar, unit, setting or empty-document error.
    ValueError
        If a data line's value is not a number.
    """
    from scalgo.parser.parser import parse as _parse

    return _parse(source)


def parse_reader(reader: Iterable[str]) -> "Enlistment":
    """Parse a scalgo document from an open text stream.

    Parameters
    ----------
    reader:
        Any iterable of lines, typically an open file.  It is not closed.

    Returns
    -------
    Enlistment
        The finalized enlistment.
    """
    from scalgo.parser.parser import parse_reader as _parse_reader

    return _parse_reader(reader)


def load(path: str | os.PathLike[str]) -> "Enlistment":
    """Parse the scalgo document stored at ``path``.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    """
    from scalgo.parser.parser import parse_file

    return parse_file(path)


def format(enlistment: "Enlistment") -> str:  # noqa: A001
    """Format an ``Enlistment`` as canonical document text.

    Returns
    -------
    str
        Canonical text ending with a newline.
    """
    from scalgo.formatter.formatter import format_enlistment

    return format_enlistment(enlistment)


def resolve_unit(text: str) -> "Unit | None":
    """Resolve a unit string such as ``"hr"`` against every unit category.

    Returns ``None`` for the empty string.

    Raises
    ------
    scalgo.errors.UnitResolutionError
        If no category recognizes ``text``.
    """
    from scalgo.units import resolve_unit as _resolve_unit

    return _resolve_unit(text)


__all__ = [
    "__version__",
    "parse",
    "parse_reader",
    "load",
    "format",
    "resolve_unit",
]
