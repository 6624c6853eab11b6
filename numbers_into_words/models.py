"""
Data model for number-to-words conversion.

The conjunction policy and the transient ``Group`` are plain Python types
used on the hot path. Everything that crosses a boundary (CLI report, HTTP
response) is a pydantic model, so bad data fails loudly at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from .exceptions import InvalidAndOptionError

MAX_VALUE: int = 2**64 - 1

_AND = " and "
_SPACE = " "


# ─── Conjunction Policy ─────────────────────────────────────────────


class ConjunctionPolicy(str, Enum):
    """Where the word "and" goes between a group's hundreds and its remainder.

    Member values double as the ``--and=`` tokens.
    """

    NONE = "none"  # never
    LAST_GROUP_ONLY = "last"  # units group only
    UNDER_THOUSAND = "below1k"  # only when the whole value is < 1000
    ALL = "all"  # every group

    @classmethod
    def from_token(cls, token: str) -> ConjunctionPolicy:
        """Map a serialized token (case-insensitive) onto a policy.

        Raises:
            InvalidAndOptionError: If the token names no policy.
        """
        cleaned = token.lower()
        try:
            return cls(cleaned)
        except ValueError:
            raise InvalidAndOptionError(
                f'Invalid "and" option: {cleaned}',
                details={"token": token, "allowed": [p.value for p in cls]},
            ) from None

    def insert_and(self, group_index: int, full_value: int) -> str:
        """Separator between the hundreds word and the tens/units words."""
        if self is ConjunctionPolicy.ALL:
            return _AND
        if self is ConjunctionPolicy.LAST_GROUP_ONLY:
            return _AND if group_index == 0 else _SPACE
        if self is ConjunctionPolicy.UNDER_THOUSAND:
            return _AND if full_value < 1000 else _SPACE
        return _SPACE


DEFAULT_POLICY = ConjunctionPolicy.ALL


# ─── Magnitude Group ────────────────────────────────────────────────


@dataclass(frozen=True)
class Group:
    """One base-1000 digit of a value, with its position and the value it came from."""

    value: int  # 0..999
    index: int  # 0 = units ... 6 = quintillions
    full_value: int


# ─── Boundary Models ────────────────────────────────────────────────


class Conversion(BaseModel):
    """A single successfully converted number."""

    value: int = Field(ge=0, le=MAX_VALUE)
    policy: ConjunctionPolicy
    words: str


class InputFinding(BaseModel):
    """A rejected input token, kept so the rest of the batch can proceed."""

    code: str  # Machine-readable, e.g. "VALUE_TOO_LARGE"
    token: str  # The raw argument as given
    message: str  # Human-readable, printed under "Errors"


class ConversionReport(BaseModel):
    """Everything one batch of arguments produced."""

    conversions: list[Conversion] = Field(default_factory=list)
    errors: list[InputFinding] = Field(default_factory=list)
    policy: ConjunctionPolicy = DEFAULT_POLICY
    help_requested: bool = False
    has_arguments: bool = True

    @property
    def is_valid(self) -> bool:
        return self.has_arguments and not self.errors
