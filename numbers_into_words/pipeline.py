"""
Batch conversion session — turns a list of raw arguments into a report.

Flow:
  ┌──────────────┐
  │  raw tokens  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Classifier  │   ← NUMBER / HELP / AND_OPTION, or a per-token error
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Policy pick  │   ← last --and= wins, applies to the whole batch
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  to_words()  │   ← pure engine, one call per number
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │    Report    │   ← conversions + errors, both in input order
  └──────────────┘

A rejected token is recorded as an ``InputFinding`` and never stops the
rest of the batch. ``RangeViolation`` from the engine is a bug and is
deliberately not caught here.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .arguments import Argument, ArgumentKind, parse_single_input
from .exceptions import NumberWordsError
from .grouper import to_words
from .models import (
    DEFAULT_POLICY,
    ConjunctionPolicy,
    Conversion,
    ConversionReport,
    InputFinding,
)

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Converts one batch of command-line style arguments.

    Usage:
        pipeline = ConversionPipeline()
        report = pipeline.run(["42", "--and=none", "1,001"])
        for conversion in report.conversions:
            print(conversion.value, conversion.words)
    """

    def __init__(self, default_policy: ConjunctionPolicy = DEFAULT_POLICY):
        self.default_policy = default_policy

    def run(self, args: Iterable[str]) -> ConversionReport:
        """Classify and convert every argument (program name excluded).

        Returns:
            ConversionReport; ``has_arguments`` is False for an empty batch.
        """
        tokens = list(args)
        if not tokens:
            logger.info("No arguments given")
            return ConversionReport(policy=self.default_policy, has_arguments=False)

        # ── Step 1: Classify each token independently ──────────────
        parsed: list[tuple[str, Argument]] = []
        errors: list[InputFinding] = []
        for token in tokens:
            try:
                argument = parse_single_input(token)
            except NumberWordsError as exc:
                logger.warning("Rejected argument %r: [%s] %s", token, exc.code, exc)
                errors.append(
                    InputFinding(code=exc.code, token=token, message=exc.message)
                )
                continue
            logger.debug("Argument %r classified as %s", token, argument.kind.value)
            parsed.append((token, argument))

        # ── Step 2: Batch-wide options ──────────────────────────────
        policy = self.default_policy
        help_requested = False
        for _, argument in parsed:
            if argument.kind is ArgumentKind.AND_OPTION:
                assert argument.policy is not None
                policy = argument.policy
            elif argument.kind is ArgumentKind.HELP:
                help_requested = True

        # ── Step 3: Convert numbers in input order ──────────────────
        conversions = [
            self.convert(argument.number, policy)
            for _, argument in parsed
            if argument.kind is ArgumentKind.NUMBER and argument.number is not None
        ]

        logger.info(
            "Converted %d number(s), rejected %d argument(s) [policy=%s]",
            len(conversions),
            len(errors),
            policy.value,
        )
        return ConversionReport(
            conversions=conversions,
            errors=errors,
            policy=policy,
            help_requested=help_requested,
        )

    @staticmethod
    def convert(value: int, policy: ConjunctionPolicy) -> Conversion:
        """Convert a single already-validated value."""
        return Conversion(value=value, policy=policy, words=to_words(value, policy))
