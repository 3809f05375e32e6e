"""Settings directives: ``@scale``, ``@sorted`` and ``@reverse``.

A directive line has the form ``@name value``, split on its first space.
Applying a directive is a pure state transition::

    apply_directive(settings, "@scale day") -> settings'

``EnlistmentSettings`` is frozen, so every transition returns a new value
and the reading loop can be audited one line at a time.

Boolean directives accept exactly the literal ``true``; any other value,
including ``True`` and ``1``, means false.  ``@scale`` resolves its value
through the unit registry and lets a ``UnitResolutionError`` propagate
unwrapped.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Final

from scalgo.errors import SettingError
from scalgo.units import Unit, resolve_unit

logger = logging.getLogger(__name__)

TRUE_LITERAL: Final[str] = "true"


@dataclass(frozen=True, slots=True)
class EnlistmentSettings:
    """Document-level configuration of an enlistment.

    Parameters
    ----------
    scale_unit:
        Unit values are displayed in; ``None`` until set by ``@scale`` or
        defaulted at finalize time.
    sorted:
        Whether records are sorted by base value at finalize time.
    reversed:
        Whether sorting and reference selection run in descending order.
    """

    scale_unit: Unit | None = None
    sorted: bool = True
    reversed: bool = False


DirectiveHandler = Callable[[EnlistmentSettings, str], EnlistmentSettings]


def _apply_scale(settings: EnlistmentSettings, value: str) -> EnlistmentSettings:
    return replace(settings, scale_unit=resolve_unit(value))


def _apply_sorted(settings: EnlistmentSettings, value: str) -> EnlistmentSettings:
    return replace(settings, sorted=value == TRUE_LITERAL)


def _apply_reverse(settings: EnlistmentSettings, value: str) -> EnlistmentSettings:
    return replace(settings, reversed=value == TRUE_LITERAL)


DIRECTIVES: Final[Mapping[str, DirectiveHandler]] = MappingProxyType({
    "@scale": _apply_scale,
    "@sorted": _apply_sorted,
    "@reverse": _apply_reverse,
})


def split_directive(text: str) -> tuple[str, str]:
    """Split ``"@name value"`` into ``("@name", "value")``.

    The value is everything after the first space, taken verbatim.
    """
    name, _, value = text.partition(" ")
    return name, value


def apply_directive(settings: EnlistmentSettings, text: str) -> EnlistmentSettings:
    """Return ``settings`` updated by the directive line ``text``.

    Parameters
    ----------
    settings:
        The current settings.
    text:
        A full directive line, e.g. ``"@sorted false"``.

    Returns
    -------
    EnlistmentSettings
        A new settings value; ``settings`` itself is not modified.

    Raises
    ------
    SettingError
        ``"Unknown setting <text>"`` if the name is not a known directive.
    UnitResolutionError
        If ``@scale`` names a unit no category recognizes.
    """
    name, value = split_directive(text)
    handler = DIRECTIVES.get(name)
    if handler is None:
        raise SettingError(f"Unknown setting {text}")
    updated = handler(settings, value)
    logger.debug("Applied %s %r -> %r", name, value, updated)
    return updated
