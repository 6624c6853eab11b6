"""
Convert a full 64-bit unsigned value to English words.

The value is split into seven base-1000 groups (units up to quintillions).
Zero groups are dropped, each remaining group is rendered by
``lexical.render_under_1000`` and suffixed with its magnitude name, and the
pieces are joined most-significant first with ", ":

    2859        → "two thousand, eight-hundred and fifty-nine"
    14000001019 → "fourteen billion, one thousand, nineteen"

Pure and stateless: safe to call from any number of threads.
"""

from __future__ import annotations

from .exceptions import RangeViolation
from .lexical import render_under_1000, single_digit
from .models import DEFAULT_POLICY, MAX_VALUE, ConjunctionPolicy, Group

MAGNITUDE_NAMES: tuple[str, ...] = (
    "",
    " thousand",
    " million",
    " billion",
    " trillion",
    " quadrillion",
    " quintillion",
)

GROUP_SEPARATOR = ", "


def _check_value(value: int) -> None:
    # bool is an int subclass; True/False are never meant as numbers here
    if not isinstance(value, int) or isinstance(value, bool):
        raise RangeViolation("to_words", value, "an int")
    if not 0 <= value <= MAX_VALUE:
        raise RangeViolation("to_words", value, f"0..{MAX_VALUE}")


def split_groups(value: int) -> list[Group]:
    """Nonzero base-1000 groups of ``value``, most significant first."""
    _check_value(value)
    groups: list[Group] = []
    for index in range(len(MAGNITUDE_NAMES) - 1, -1, -1):
        group_value = (value // 1000**index) % 1000
        if group_value:
            groups.append(Group(group_value, index, value))
    return groups


def to_words(value: int, policy: ConjunctionPolicy = DEFAULT_POLICY) -> str:
    """Render ``value`` in English words.

    Args:
        value: Integer in 0..2**64-1.
        policy: Placement of "and" inside each group. Defaults to ALL.

    Returns:
        e.g. ``to_words(731) == "seven-hundred and thirty-one"``.

    Raises:
        RangeViolation: If ``value`` is not an int in range. Validating user
            input is the caller's job (see ``arguments.parse_single_input``).
    """
    _check_value(value)
    if value == 0:
        return single_digit(0)
    return GROUP_SEPARATOR.join(
        render_under_1000(g.value, g.index, policy, g.full_value)
        + MAGNITUDE_NAMES[g.index]
        for g in split_groups(value)
    )
