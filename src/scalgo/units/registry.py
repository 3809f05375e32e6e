"""Unit category registry and unit-string resolution.

Each quantity category contributes one *parser*: a callable that turns a
unit string into a ``Unit`` or raises ``UnitResolutionError``.  The
registry keeps parsers in registration order and ``resolve`` tries them
in that order, returning the first success.  Only the time category
ships with scalgo; other packages add categories by declaring
entry-points in the ``scalgo.units`` group.

Example
-------
Register a category with the decorator::

    from types import MappingProxyType
    from scalgo.units.registry import unit_registry

    _GRAMS = MappingProxyType({"g": Unit("mass", "gram", 1)})

    @unit_registry.register("mass", aliases=_GRAMS)
    def new_mass_unit(text: str) -> Unit:
        ...

Resolve a string against every registered category::

    from scalgo.units import resolve_unit
    resolve_unit("hours")   # Unit(category='time', name='hour', factor=3600)
    resolve_unit("")        # None, i.e. "no unit"
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from scalgo.errors import UnitResolutionError
from scalgo.units.base import Unit

logger = logging.getLogger(__name__)

UnitParser = Callable[[str], Unit]

ENTRYPOINT_GROUP = "scalgo.units"

_NO_ALIASES: Mapping[str, Unit] = MappingProxyType({})


class CategoryNotFoundError(KeyError):
    """Raised when a requested category name is not in the registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.category_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Unit category {name!r} is not registered in the {registry_name!r} registry."
        )


class CategoryAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a category name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.category_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Unit category {name!r} is already registered in the {registry_name!r} registry. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class UnitCategoryRegistry:
    """Ordered registry of unit category parsers.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._parsers: dict[str, UnitParser] = {}
        self._aliases: dict[str, Mapping[str, Unit]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self, name: str, aliases: Mapping[str, Unit] | None = None
    ) -> Callable[[UnitParser], UnitParser]:
        """Return a decorator that registers the decorated parser.

        Parameters
        ----------
        name:
            The unique category name, e.g. ``"time"``.
        aliases:
            Optional read-only alias table, used for listing only.

        Raises
        ------
        CategoryAlreadyRegisteredError
            If ``name`` is already in use in this registry.
        """

        def decorator(parser: UnitParser) -> UnitParser:
            self.register_parser(name, parser, aliases)
            return parser

        return decorator

    def register_parser(
        self,
        name: str,
        parser: UnitParser,
        aliases: Mapping[str, Unit] | None = None,
    ) -> None:
        """Register ``parser`` under ``name`` at the end of the dispatch order.

        Raises
        ------
        CategoryAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``parser`` is not callable.
        """
        if name in self._parsers:
            raise CategoryAlreadyRegisteredError(name, self._name)
        if not callable(parser):
            raise TypeError(
                f"Cannot register {parser!r} under {name!r}: unit parsers must be callable."
            )
        self._parsers[name] = parser
        self._aliases[name] = aliases if aliases is not None else _NO_ALIASES
        logger.debug("Registered unit category %r in registry %r", name, self._name)

    def deregister(self, name: str) -> None:
        """Remove a category from the registry.

        Raises
        ------
        CategoryNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._parsers:
            raise CategoryNotFoundError(name, self._name)
        del self._parsers[name]
        del self._aliases[name]
        logger.debug("Deregistered unit category %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> UnitParser:
        """Return the parser registered under ``name``."""
        try:
            return self._parsers[name]
        except KeyError:
            raise CategoryNotFoundError(name, self._name) from None

    def aliases(self, name: str) -> Mapping[str, Unit]:
        """Return the alias table registered for category ``name``."""
        try:
            return self._aliases[name]
        except KeyError:
            raise CategoryNotFoundError(name, self._name) from None

    def list_categories(self) -> list[str]:
        """Return category names in dispatch order."""
        return list(self._parsers)

    def resolve(self, text: str) -> Unit | None:
        """Resolve ``text`` against every category in dispatch order.

        Parameters
        ----------
        text:
            A unit string such as ``"Hours"`` or ``"yr"``.

        Returns
        -------
        Unit | None
            The first unit any category recognizes, or ``None`` when
            ``text`` is empty (a unitless value).

        Raises
        ------
        UnitResolutionError
            If no category recognizes a non-empty ``text``.
        """
        if text == "":
            return None
        for parser in self._parsers.values():
            try:
                return parser(text)
            except UnitResolutionError:
                continue
        raise UnitResolutionError(f"no matching unit found for {text}")

    def __contains__(self, name: object) -> bool:
        return name in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)

    def __repr__(self) -> str:
        return f"UnitCategoryRegistry(name={self._name!r}, categories={self.list_categories()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register unit categories declared as entry-points.

        Each entry-point must point at a unit parser callable.  Names that
        are already registered are skipped, so repeated calls are
        idempotent.  Entry-points that fail to import are logged and
        skipped.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."scalgo.units"]
            mass = "scalgo_mass.units:new_mass_unit"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._parsers:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                parser = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_parser(ep.name, parser)
            except (CategoryAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )


unit_registry = UnitCategoryRegistry("units")


def resolve_unit(text: str) -> Unit | None:
    """Resolve ``text`` with the process-wide ``unit_registry``."""
    return unit_registry.resolve(text)
