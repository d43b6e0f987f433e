"""Russian numeral agreement helpers.

Both functions here are best-effort: they never raise and degrade to an empty string or `0.0`
on input they cannot interpret.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from src.duration.schema import NumeralForms, PeriodType

NUMERAL_FORMS: Mapping[PeriodType, NumeralForms] = MappingProxyType(
    {
        PeriodType.year: NumeralForms(one="год", few="года", many="лет"),
        PeriodType.month: NumeralForms(one="месяц", few="месяца", many="месяцев"),
        PeriodType.day: NumeralForms(one="день", few="дня", many="дней"),
    }
)

_AMOUNT_RE = re.compile(r"^(?P<number>\d+)(?:\.(?P<fraction>\d{1,2}))?$")

# Leading numeric prefix, as accepted by a lenient float cast ("12abc" -> 12.0).
_FLOAT_PREFIX_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def clean_float_from_comma(text: str) -> float:
    """Parse a decimal number that may use `,` as the separator (`"3,5"` -> `3.5`)."""

    value = str(text).replace(",", ".")
    match = _FLOAT_PREFIX_RE.match(value)
    if not match:
        return 0.0
    return float(match.group(0))


def _normalize_amount(amount: Any) -> str:
    """Round-trip the amount through float and render it with 14 significant digits."""

    try:
        value = float(str(amount).strip().replace(",", "."))
    except ValueError:
        # Non-numeric text, or an int too long for str().
        return ""
    if not math.isfinite(value):
        return ""
    return format(value, ".14g")


def get_numeral_suffix(amount: Any, forms: NumeralForms | Mapping[str, str]) -> str:
    """Pick the Russian noun form agreeing with `amount`.

    Examples:
        `1 -> one`, `22 -> few`, `15 -> many`, `"2,5" -> few`.

    Returns:
        The matching form, or `""` when `amount` is not a non-negative number with at most two
        fractional digits.

    Raises:
        pydantic.ValidationError: If `forms` lacks one of the `one`/`few`/`many` keys. This is
            a caller error; `amount` itself never causes an exception.
    """

    if not isinstance(forms, NumeralForms):
        forms = NumeralForms.model_validate(dict(forms))

    match = _AMOUNT_RE.fullmatch(_normalize_amount(amount))
    if not match:
        return ""

    num = int(match.group("number")) % 100
    if num > 19:
        num %= 10

    if num == 1:
        return forms.one
    if num in (2, 3, 4):
        return forms.few
    return forms.many
