"""scalgo canonical formatter."""
from __future__ import annotations

from scalgo.formatter.formatter import EnlistmentFormatter, format_enlistment, format_number

__all__ = ["EnlistmentFormatter", "format_enlistment", "format_number"]
