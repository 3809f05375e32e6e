"""scalgo parser module.

Exports the ``EnlistmentParser`` class, the ``parse``, ``parse_reader``
and ``parse_file`` convenience functions, and the error types they raise.
"""
from __future__ import annotations

from scalgo.errors import (
    EmptyDocumentError,
    GrammarError,
    ScalgoError,
    SettingError,
    UnitResolutionError,
)
from scalgo.parser.parser import EnlistmentParser, parse, parse_file, parse_reader

__all__ = [
    "EnlistmentParser",
    "parse",
    "parse_file",
    "parse_reader",
    "ScalgoError",
    "GrammarError",
    "UnitResolutionError",
    "SettingError",
    "EmptyDocumentError",
]
