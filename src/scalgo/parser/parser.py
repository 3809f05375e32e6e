"""scalgo document parser.

Turns a stream of classified ``Line`` tokens into a finalized
``Enlistment``::

    Empty -> Reading (append record | apply directive | skip) -> Finalized

Blank and comment lines are skipped, directive lines update the
enlistment settings immediately, and data lines become records in input
order.  Once the source is exhausted the enlistment is finalized.

Construction is all-or-nothing: the first error aborts the parse and no
partial enlistment is returned.  Domain errors get the offending line
number attached as ``exc.line``; their message is left untouched.  I/O
errors and the ``ValueError`` from an unparsable number propagate as
they are.
"""
from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable

from scalgo.errors import ScalgoError
from scalgo.grammar.tokens import Line, LineKind
from scalgo.lexer.lexer import LineLexer
from scalgo.model.enlistment import Enlistment
from scalgo.model.record import Record

logger = logging.getLogger(__name__)


class EnlistmentParser:
    """Builds an ``Enlistment`` from classified lines.

    Parameters
    ----------
    lines:
        The lines produced by ``LineLexer``.  They are consumed once.
    """

    def __init__(self, lines: Iterable[Line]) -> None:
        self._lines = lines

    def parse(self) -> Enlistment:
        """Read every line and return the finalized enlistment.

        Raises
        ------
        GrammarError
            On a data line without a colon or label.
        ValueError
            On a data line whose value is not a number.
        UnitResolutionError
            On an unknown unit in a data line or ``@scale`` directive.
        SettingError
            On an unknown directive.
        EmptyDocumentError
            If the document contains no data lines.
        OSError
            If the underlying source fails to read.
        """
        enlistment = Enlistment()
        for line in self._lines:
            if not line.is_significant:
                continue
            try:
                self._apply_line(enlistment, line)
            except ScalgoError as exc:
                exc.line = line.number
                raise
        return enlistment.finalize()

    def _apply_line(self, enlistment: Enlistment, line: Line) -> None:
        if line.kind is LineKind.DIRECTIVE:
            enlistment.apply_setting(line.text)
        else:
            enlistment.append(Record.from_line(line.text))


def parse_reader(reader: Iterable[str]) -> Enlistment:
    """Parse a document from an open text stream or any iterable of lines.

    The caller owns ``reader``; it is read to exhaustion but not closed.
    """
    return EnlistmentParser(LineLexer(reader)).parse()


def parse(source: str) -> Enlistment:
    """Parse a document held in a string.

    Lines are split on newlines only, exactly as when reading a file.

    Example
    -------
    ::

        from scalgo.parser import parse
        enlistment = parse("Tea: 4 min\\nEgg: 6 min\\n")
        enlistment.ref_record.label   # 'Tea'
    """
    return parse_reader(io.StringIO(source, newline=None))


def parse_file(path: str | os.PathLike[str]) -> Enlistment:
    """Parse the document stored at ``path`` (UTF-8).

    Raises
    ------
    OSError
        If the file cannot be opened or read, unwrapped.
    """
    logger.debug("Parsing %s", path)
    with open(path, encoding="utf-8") as handle:
        return parse_reader(handle)
