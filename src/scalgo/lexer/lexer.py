"""scalgo line lexer: classifies document lines and splits data lines.

The lexer walks any iterable of text lines (an open file, a list, a
``StringIO``) and yields one ``Line`` token per line,
lazily, so a read error from the underlying source surfaces at the point
it happens and propagates unchanged.

Classification, in order:
    - whitespace-only lines are ``BLANK``
    - lines starting with ``#`` are ``COMMENT``
    - lines starting with ``@`` are ``DIRECTIVE``
    - everything else is ``DATA``

Prefixes are matched against the raw line: ``"  # note"`` is a data line
(and fails to parse, having no colon).

``split_data_line`` implements the data-line grammar::

    label ':' number [' ' unit]
"""
from __future__ import annotations

import io
import re
from collections.abc import Iterable, Iterator
from typing import Final

from scalgo.errors import GrammarError
from scalgo.grammar.tokens import COMMENT_PREFIX, DIRECTIVE_PREFIX, Line, LineKind

# ASCII decimal only: no digit-group underscores, no non-ASCII digits.
_NUMBER_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def classify(text: str) -> LineKind:
    """Return the ``LineKind`` of a single line without its terminator."""
    if not text.strip():
        return LineKind.BLANK
    if text.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if text.startswith(DIRECTIVE_PREFIX):
        return LineKind.DIRECTIVE
    return LineKind.DATA


class LineLexer:
    """Lazy lexer over a sequence of raw lines.

    Parameters
    ----------
    source:
        Any iterable of strings.  Trailing ``\\r``/``\\n`` characters are
        stripped from each item.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[str]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[Line]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Line]:
        """Yield a classified ``Line`` for every line of the source."""
        for number, raw in enumerate(self._source, start=1):
            text = raw.rstrip("\r\n")
            yield Line(kind=classify(text), text=text, number=number)


def parse_number(token: str) -> float:
    """Parse a base-10 number with ``.`` as the decimal point.

    Raises ``ValueError`` with the same message ``float()`` uses.
    """
    if _NUMBER_RE.fullmatch(token) is None:
        raise ValueError(f"could not convert string to float: {token!r}")
    return float(token)


def split_data_line(text: str) -> tuple[str, float, str]:
    """Split a data line into label, numeric value and unit string.

    The label is everything before the first ``:``; the rest is trimmed
    and split on its first space into the value token and the unit
    token.  Only whitespace is trimmed, so ``"3 years."`` yields the unit
    string ``"years."``.

    Parameters
    ----------
    text:
        A data line such as ``"Label 1: 3.14 years"``.

    Returns
    -------
    tuple[str, float, str]
        ``(label, value, unit)``; ``unit`` is ``""`` when omitted.

    Raises
    ------
    GrammarError
        If there is no colon or the label is empty.
    ValueError
        If the value token is not an ASCII decimal number.
    """
    label, colon, rest = text.strip().partition(":")
    if not colon:
        raise GrammarError("No colon found in input string")
    label = label.strip()
    if not label:
        raise GrammarError("No label found in input string")
    value_token, _, unit = rest.strip().partition(" ")
    return label, parse_number(value_token), unit


def tokenize(source: str) -> list[Line]:
    """Classify every line of ``source`` and return the tokens.

    Example
    -------
    ::

        from scalgo.lexer import tokenize
        lines = tokenize("# durations\\nBoil an egg: 6 min\\n")
    """
    return list(LineLexer(io.StringIO(source, newline=None)))
