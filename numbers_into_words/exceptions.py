"""
Exception hierarchy for number-to-words conversion.

Two families, handled very differently:

  - ``NumberWordsError`` and its subclasses describe a bad *input token*
    (a malformed numeral, a value past 64 bits, an unknown flag). They are
    recoverable: the pipeline records them and keeps converting the rest
    of the batch.
  - ``RangeViolation`` means a helper was called outside its domain. That is
    a bug in the caller, not a data condition, so it is never caught.
"""

from __future__ import annotations


class NumberWordsError(Exception):
    """Base exception for all rejected user input."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(NumberWordsError):
    """The token contains no digits at all."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class ValueTooLargeError(NumberWordsError):
    """The token's digits exceed the 64-bit unsigned range."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("VALUE_TOO_LARGE", message, details)


class InvalidOptionError(NumberWordsError):
    """An unrecognised ``--`` flag."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_OPTION", message, details)


class InvalidAndOptionError(NumberWordsError):
    """The value given to ``--and=`` is not a known conjunction policy."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AND_OPTION", message, details)


class RangeViolation(AssertionError):
    """A conversion helper received a value outside its documented domain.

    Raised explicitly (not via ``assert``) so it still fires under ``python -O``.
    """

    def __init__(self, helper: str, value: object, limit: str):
        self.helper = helper
        self.value = value
        super().__init__(f"{helper}() got {value!r}; expected {limit}")
