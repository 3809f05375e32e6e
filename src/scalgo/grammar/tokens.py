"""Line token definitions for the scalgo document format.

The format is line oriented, so the lexer emits one ``Line`` token per
physical line.  Each token records its ``LineKind`` and the line text
with the line terminator removed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final

COMMENT_PREFIX: Final[str] = "#"
DIRECTIVE_PREFIX: Final[str] = "@"


class LineKind(Enum):
    """Classification of a single document line."""

    BLANK = auto()
    COMMENT = auto()
    DIRECTIVE = auto()
    DATA = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """A classified source line.

    Parameters
    ----------
    kind:
        The ``LineKind`` variant for this line.
    text:
        The raw line text without its terminator.
    number:
        1-based line number in the source.
    """

    kind: LineKind
    text: str
    number: int

    def __repr__(self) -> str:
        return f"Line({self.kind.name}, {self.text!r}, {self.number})"

    @property
    def is_significant(self) -> bool:
        """Return True for lines the parser acts on (directives and data)."""
        return self.kind in (LineKind.DIRECTIVE, LineKind.DATA)
