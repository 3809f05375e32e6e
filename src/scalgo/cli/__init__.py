"""Command-line interface for scalgo.

``scalgo.cli.main`` holds the Click group and the ``show``, ``parse``,
``fmt``, ``units`` and ``version`` commands.  Commands reach the library
through the subpackage ``__init__`` exports only.
"""
from __future__ import annotations
