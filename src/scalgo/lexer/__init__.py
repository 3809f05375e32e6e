"""scalgo line lexer.

Exports the ``LineLexer`` class, the ``tokenize`` convenience function and
the data-line splitter.
"""
from __future__ import annotations

from scalgo.lexer.lexer import LineLexer, classify, split_data_line, tokenize

__all__ = ["LineLexer", "classify", "split_data_line", "tokenize"]
