"""Time units.

Factors are seconds per unit.  Months, years and the longer spans use
fixed conventions rather than calendar arithmetic:

- month: 30 days
- year: 365 days
- decade, century, millennium: 10, 100 and 1000 such years
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Final

from scalgo.errors import UnitResolutionError
from scalgo.units.base import TIME, Unit
from scalgo.units.registry import unit_registry


class TimeUnits(IntEnum):
    """Seconds per unit for every supported time unit."""

    SECOND = 1
    MINUTE = 60
    HOUR = 3600
    DAY = 86400  # 24 hours
    WEEK = 604800  # 7 days
    MONTH = 2592000  # 30 days
    YEAR = 31536000  # 365 days
    DECADE = 315360000
    CENTURY = 3153600000
    MILLENNIUM = 31536000000


def _unit(member: TimeUnits) -> Unit:
    return Unit(category=TIME, name=member.name.lower(), factor=int(member))


SECOND: Final[Unit] = _unit(TimeUnits.SECOND)
MINUTE: Final[Unit] = _unit(TimeUnits.MINUTE)
HOUR: Final[Unit] = _unit(TimeUnits.HOUR)
DAY: Final[Unit] = _unit(TimeUnits.DAY)
WEEK: Final[Unit] = _unit(TimeUnits.WEEK)
MONTH: Final[Unit] = _unit(TimeUnits.MONTH)
YEAR: Final[Unit] = _unit(TimeUnits.YEAR)
DECADE: Final[Unit] = _unit(TimeUnits.DECADE)
CENTURY: Final[Unit] = _unit(TimeUnits.CENTURY)
MILLENNIUM: Final[Unit] = _unit(TimeUnits.MILLENNIUM)

# Surface spelling (lower case) -> unit.
TIME_ALIASES: Final[Mapping[str, Unit]] = MappingProxyType({
    "second": SECOND,
    "seconds": SECOND,
    "sec": SECOND,
    "s": SECOND,
    "minute": MINUTE,
    "minutes": MINUTE,
    "min": MINUTE,
    "m": MINUTE,
    "hour": HOUR,
    "hours": HOUR,
    "hr": HOUR,
    "h": HOUR,
    "day": DAY,
    "days": DAY,
    "d": DAY,
    "week": WEEK,
    "weeks": WEEK,
    "wk": WEEK,
    "w": WEEK,
    "month": MONTH,
    "months": MONTH,
    "mo": MONTH,
    "year": YEAR,
    "years": YEAR,
    "yr": YEAR,
    "y": YEAR,
    "decade": DECADE,
    "decades": DECADE,
    "century": CENTURY,
    "centuries": CENTURY,
    "millennium": MILLENNIUM,
    "millennia": MILLENNIUM,
})


def lookup_time_unit(text: str) -> Unit | None:
    """Return the time unit spelled ``text``, or None if there is none."""
    return TIME_ALIASES.get(text.strip().lower())


@unit_registry.register(TIME, aliases=TIME_ALIASES)
def new_time_unit(text: str) -> Unit:
    """Parse ``text`` as a time unit.

    Parameters
    ----------
    text:
        Any alias from ``TIME_ALIASES``, in any letter case.

    Raises
    ------
    UnitResolutionError
        ``"Unknown unit <text>"`` if ``text`` is not a time unit.
    """
    unit = lookup_time_unit(text)
    if unit is None:
        raise UnitResolutionError(f"Unknown unit {text}")
    return unit
