"""Formal grammar of the scalgo document format.

The grammar is implemented by the hand-written line lexer in
``scalgo.lexer`` and the directive table in ``scalgo.settings``; these
constants are the reference documentation for both.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``[ ]``     optional (zero or one)
    ``{ }``     zero or more repetitions
    ``EOL``     end of line
"""
from __future__ import annotations

GRAMMAR_DOCUMENT = """
document ::= { line EOL }

line ::= blank_line | comment_line | directive_line | data_line

blank_line     ::= { WHITESPACE }
comment_line   ::= '#' { ANY }
directive_line ::= '@' NAME [ ' ' { ANY } ]
"""

GRAMMAR_DATA_LINE = """
data_line ::= label ':' rest

label  ::= { ANY - ':' }            (trimmed; must be non-empty)
rest   ::= number [ ' ' unit ]       (rest is trimmed, then split at its first space)
number ::= [ SIGN ] DIGITS [ '.' DIGITS ] [ EXPONENT ] | 'inf' | 'nan'
                                   (ASCII digits, '.' as decimal point)
unit   ::= { ANY }                 (may hold spaces; trimmed and resolved
                                    case-insensitively)
"""

GRAMMAR_DIRECTIVES = """
scale_directive   ::= '@scale'   ' ' unit
sorted_directive  ::= '@sorted'  ' ' ( 'true' | ANY )
reverse_directive ::= '@reverse' ' ' ( 'true' | ANY )
"""

# Canonical directive order used by the formatter.
DIRECTIVE_ORDER: tuple[str, ...] = ("@scale", "@sorted", "@reverse")

ALL_PRODUCTIONS: dict[str, str] = {
    "document": GRAMMAR_DOCUMENT,
    "data_line": GRAMMAR_DATA_LINE,
    "directives": GRAMMAR_DIRECTIVES,
}
