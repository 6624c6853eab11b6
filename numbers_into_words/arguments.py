"""
Classify a single command-line token.

    "42"              → NUMBER 42
    "92,582,349"      → NUMBER 92582349   (non-digits are ignored)
    "--help" / "help" → HELP
    "--and=LAST"      → AND_OPTION ConjunctionPolicy.LAST_GROUP_ONLY

Anything else raises a ``NumberWordsError`` subclass carrying the message
printed under "Errors". Tokens are independent: one bad token never
affects how another is classified.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidInputError, InvalidOptionError, ValueTooLargeError
from .models import MAX_VALUE, ConjunctionPolicy

_OPTION_PREFIX = "--"
_AND_OPTION = "and="
_MAX_DIGITS = len(str(MAX_VALUE))


class ArgumentKind(str, Enum):
    NUMBER = "NUMBER"
    HELP = "HELP"
    AND_OPTION = "AND_OPTION"


@dataclass(frozen=True)
class Argument:
    """A successfully classified token."""

    kind: ArgumentKind
    number: Optional[int] = None
    policy: Optional[ConjunctionPolicy] = None


HELP = Argument(ArgumentKind.HELP)


def parse_single_input(text: str) -> Argument:
    """Classify one raw command-line token.

    Raises:
        InvalidAndOptionError: ``--and=`` with an unknown policy token.
        InvalidOptionError: Any other unknown ``--`` flag.
        InvalidInputError: A non-flag token with no digits in it.
        ValueTooLargeError: The digits exceed 2**64 - 1.
    """
    cleaned = text.lower()

    if cleaned == "help":
        return HELP
    if len(cleaned) > len(_OPTION_PREFIX) and cleaned.startswith(_OPTION_PREFIX):
        return _parse_option(cleaned[len(_OPTION_PREFIX):])
    return Argument(ArgumentKind.NUMBER, number=parse_number(text))


def parse_number(text: str) -> int:
    """Read the ASCII digits of ``text`` as an unsigned 64-bit value.

    Separators such as ``,`` and ``_`` are dropped along with every other
    non-digit character.
    """
    digits = "".join(ch for ch in text if ch in "0123456789")
    if not digits:
        raise InvalidInputError(f"Invalid input: {text}", details={"token": text})

    significant = digits.lstrip("0") or "0"
    # length first: int() refuses very long digit strings
    if len(significant) > _MAX_DIGITS or int(significant) > MAX_VALUE:
        raise ValueTooLargeError(
            f"Too big: {text}", details={"token": text, "max_value": MAX_VALUE}
        )
    return int(significant)


def _parse_option(option: str) -> Argument:
    """Handle the part of a ``--`` flag after the dashes (already lower-cased)."""
    if option == "help":
        return HELP
    if option.startswith(_AND_OPTION):
        policy = ConjunctionPolicy.from_token(option[len(_AND_OPTION):])
        return Argument(ArgumentKind.AND_OPTION, policy=policy)
    raise InvalidOptionError(
        f"Invalid option {_OPTION_PREFIX}{option}", details={"option": option}
    )
