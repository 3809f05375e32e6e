"""Exception types raised by scalgo.

Every error the library raises on purpose derives from ``ScalgoError``
and from the builtin exception a caller would naturally catch
(``ValueError``, ``LookupError``, ``TypeError``).  Message text is part
of the public contract and is never decorated with location
information.  Errors raised while reading a document carry the 1-based
line number in ``line``.

Two failure kinds are not wrapped:

- I/O failures surface as the original ``OSError`` (``FileNotFoundError``
  and friends), with ``filename`` set by Python.
- An unparsable number surfaces as the ``ValueError`` raised by
  ``float()``.
"""
from __future__ import annotations


class ScalgoError(Exception):
    """Base class for all scalgo domain errors.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    line:
        1-based line number in the source document, when known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class GrammarError(ScalgoError, ValueError):
    """A data line is malformed (missing colon or empty label)."""


class UnitResolutionError(ScalgoError, LookupError):
    """A unit string is not recognized by any registered category."""


class IncompatibleUnitsError(ScalgoError, TypeError):
    """Conversion was requested between units of different categories."""


class SettingError(ScalgoError, ValueError):
    """A directive line names a setting that does not exist."""


class EmptyDocumentError(ScalgoError, ValueError):
    """A document was read successfully but contained no records."""

    def __init__(self, message: str = "No records found", line: int | None = None) -> None:
        super().__init__(message, line)
