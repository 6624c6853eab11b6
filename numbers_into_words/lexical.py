"""
Render values below one thousand as English words.

    7    → "seven"
    14   → "fourteen"
    60   → "sixty"
    47   → "forty-seven"
    300  → "three-hundred"
    731  → "seven-hundred and thirty-one"   (policy-dependent "and")

Regular forms are composed from the digit words ("four" + "teen",
"six" + "ty"); only the genuinely irregular ones live in the tables.
"""

from __future__ import annotations

from .exceptions import RangeViolation
from .models import ConjunctionPolicy

# ─── Word Lookup Tables ──────────────────────────────────────────────

_DIGITS: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

_IRREGULAR_TEENS: dict[int, str] = {
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    15: "fifteen",
    18: "eighteen",
}

_IRREGULAR_TENS: dict[int, str] = {
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    80: "eighty",
}

# units, thousands ... quintillions
_MAX_GROUP_INDEX = 6


# ─── Digit / Tens ────────────────────────────────────────────────────


def single_digit(x: int) -> str:
    """Word for a single digit.

    Raises:
        RangeViolation: If ``x`` is not in 0..9.
    """
    if not 0 <= x <= 9:
        raise RangeViolation("single_digit", x, "0..9")
    return _DIGITS[x]


def under_100(x: int) -> str:
    """Words for 0..99, e.g. ``under_100(47) == "forty-seven"``.

    Raises:
        RangeViolation: If ``x`` is not in 0..99.
    """
    if not 0 <= x <= 99:
        raise RangeViolation("under_100", x, "0..99")
    if x < 10:
        return _DIGITS[x]
    if x < 20:
        return _IRREGULAR_TEENS.get(x) or f"{_DIGITS[x % 10]}teen"
    units = x % 10
    if units == 0:
        return _IRREGULAR_TENS.get(x) or f"{_DIGITS[x // 10]}ty"
    return f"{under_100(x - units)}-{_DIGITS[units]}"


# ─── Hundreds ────────────────────────────────────────────────────────


def render_under_1000(
    value: int,
    group_index: int,
    policy: ConjunctionPolicy,
    full_value: int,
) -> str:
    """Words for 0..999 as they appear inside magnitude group ``group_index``.

    Args:
        value: The group's value.
        group_index: 0 for units, 1 for thousands, ... 6 for quintillions.
        policy: Decides whether " and " or " " joins hundreds and remainder.
        full_value: The complete number being converted (for UNDER_THOUSAND).

    Raises:
        RangeViolation: If ``value`` is not in 0..999 or ``group_index``
            is not in 0..6.
    """
    if not 0 <= value <= 999:
        raise RangeViolation("render_under_1000", value, "0..999")
    if not 0 <= group_index <= _MAX_GROUP_INDEX:
        raise RangeViolation(
            "render_under_1000", group_index, f"group index 0..{_MAX_GROUP_INDEX}"
        )
    if value < 100:
        return under_100(value)

    remainder = value % 100
    hundreds = f"{_DIGITS[value // 100]}-hundred"
    if remainder == 0:
        return hundreds
    return (
        f"{hundreds}{policy.insert_and(group_index, full_value)}{under_100(remainder)}"
    )
