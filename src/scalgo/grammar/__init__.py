"""Grammar definitions for the scalgo document format."""
from __future__ import annotations

from scalgo.grammar.grammar import ALL_PRODUCTIONS, DIRECTIVE_ORDER
from scalgo.grammar.tokens import COMMENT_PREFIX, DIRECTIVE_PREFIX, Line, LineKind

__all__ = [
    "ALL_PRODUCTIONS",
    "DIRECTIVE_ORDER",
    "COMMENT_PREFIX",
    "DIRECTIVE_PREFIX",
    "Line",
    "LineKind",
]
