"""Conversion between single-unit ISO 8601 periods and Russian phrases.

Supported duration strings are `P{n}D`, `P{n}M` and `P{n}Y`. Parsing is delegated to
`isodate`, which accepts richer inputs; those are reduced as documented on each function.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import isodate
from isodate import Duration

from src.duration.numerals import NUMERAL_FORMS, get_numeral_suffix
from src.duration.schema import PeriodType

logger = logging.getLogger(__name__)

MalformedDurationError = isodate.ISO8601Error


class InvalidArgumentError(ValueError):
    """Raised for empty duration strings, negative counts or unknown period types."""


def _years(duration: Duration) -> int:
    return int(duration.years)


def _months(duration: Duration) -> int:
    return int(duration.months)


def _days(duration: Duration) -> int:
    return duration.tdelta.days


# Fixed evaluation order: largest unit first.
_FIELDS: tuple[tuple[Callable[[Duration], int], PeriodType], ...] = (
    (_years, PeriodType.year),
    (_months, PeriodType.month),
    (_days, PeriodType.day),
)


def _coerce_period_type(period_type: PeriodType | str) -> PeriodType:
    try:
        return PeriodType(period_type)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown period type: {period_type!r}") from exc


def compose_period(period_count: int, period_type: PeriodType | str) -> str:
    """Build an ISO 8601 duration string such as `P3D` from a count and a period type."""

    if not isinstance(period_count, int) or isinstance(period_count, bool):
        raise InvalidArgumentError(f"Period count must be an integer, got {period_count!r}")
    if period_count < 0:
        raise InvalidArgumentError("Period count must be a non-negative integer")

    unit = _coerce_period_type(period_type)
    return f"P{period_count}{unit.designator}"


def period_to_interval(interval_string: str) -> Duration:
    """Parse a duration string with `isodate`.

    Raises:
        InvalidArgumentError: If the string is empty.
        MalformedDurationError: If `isodate` rejects the string (propagated as is).
    """

    if not isinstance(interval_string, str) or not interval_string:
        raise InvalidArgumentError("Interval string must not be empty")

    try:
        return isodate.parse_duration(interval_string, as_timedelta_if_possible=False)
    except MalformedDurationError:
        logger.debug("malformed duration value=%r", interval_string)
        raise


def _calendar_part(interval_string: str) -> Duration:
    """Parse the string and return only its year/month/day components.

    isodate folds hours, minutes and seconds into `tdelta`, so `PT36H` would read as one day.
    The time part (after `T`) is validated with the whole string and then ignored.
    """

    duration = period_to_interval(interval_string)
    if "T" not in interval_string:
        return duration

    date_part = interval_string.partition("T")[0]
    if date_part.lstrip("+-") == "P":
        return Duration()
    if date_part[-1] not in "YMWD":
        # Alternative `PYYYY-MM-DDThh:mm:ss` form.
        return duration
    return isodate.parse_duration(date_part, as_timedelta_if_possible=False)


def period_to_count_and_unit(interval_string: str) -> tuple[int, PeriodType]:
    """Reduce a duration to its largest non-zero unit.

    The reduction is lossy: `P1Y6M` becomes `(1, year)`. Only single-unit durations are
    expected here, and existing callers depend on the "largest unit wins" result.
    An all-zero duration yields `(0, day)`; time components (`PT48H`) are not counted as days.
    """

    duration = _calendar_part(interval_string)

    for accessor, unit in _FIELDS:
        value = accessor(duration)
        if value > 0:
            return value, unit

    return 0, PeriodType.day


def interval_to_string(interval_string: str) -> str:
    """Render a duration as Russian text, e.g. `P1Y2D` -> "1 год 2 дня".

    Every non-zero unit is included (unlike `period_to_count_and_unit`); zero units are omitted,
    so an all-zero duration renders as an empty string. Hours and smaller units are ignored.
    """

    duration = _calendar_part(interval_string)

    result = ""
    for accessor, unit in _FIELDS:
        value = accessor(duration)
        if value > 0:
            result += f"{value} {get_numeral_suffix(value, NUMERAL_FORMS[unit])} "

    return result.strip()
