"""Period types and Russian numeral forms (Pydantic models)."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class PeriodType(StrEnum):
    """Supported single-unit period kinds."""

    day = "day"
    month = "month"
    year = "year"

    @property
    def designator(self) -> str:
        """ISO 8601 designator letter (`D`, `M`, `Y`)."""

        return _DESIGNATOR_BY_PERIOD_TYPE[self]


_DESIGNATOR_BY_PERIOD_TYPE: dict[PeriodType, str] = {
    PeriodType.day: "D",
    PeriodType.month: "M",
    PeriodType.year: "Y",
}

PERIOD_TYPE_BY_DESIGNATOR: dict[str, PeriodType] = {
    letter: period_type for period_type, letter in _DESIGNATOR_BY_PERIOD_TYPE.items()
}


class NumeralForms(BaseModel):
    """Three grammatical forms of a Russian noun after a cardinal number.

    `one` is used for 1, 21, 101..., `few` for 2-4 (22-24, ...), `many` for everything else.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    one: str
    few: str
    many: str
