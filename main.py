#!/usr/bin/env python3
"""
numbers_into_words — Command-Line Entry Point
=============================================

Converts every numeric argument to English words.

Usage:
    python main.py 42 92,582,349              # default "and" placement (all)
    python main.py --and=last 350000430       # "and" only in the last group
    python main.py help                       # usage text with a live example
    NUMBERS_INTO_WORDS_AND=none python main.py 731
"""

from __future__ import annotations

import logging
import os
import sys

from pydantic import ValidationError

from numbers_into_words.config import Settings
from numbers_into_words.exceptions import NumberWordsError
from numbers_into_words.formatting import render_report
from numbers_into_words.pipeline import ConversionPipeline

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Main ────────────────────────────────────────────────────────────


def run(argv: list[str]) -> tuple[str, int]:
    """Convert ``argv`` (program name first) and return (output, exit code).

    Exit code is 0 when every argument was accepted, 1 otherwise, and 2
    when the environment configuration itself is invalid.
    """
    prog_name = os.path.basename(argv[0]) if argv else "numbers_into_words"
    try:
        settings = Settings.from_env()
    except (NumberWordsError, ValidationError) as exc:
        return f"Configuration error: {exc}", 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    pipeline = ConversionPipeline(default_policy=settings.default_policy)
    report = pipeline.run(argv[1:])
    return render_report(report, prog_name), 0 if report.is_valid else 1


def main():
    """Run the converter on ``sys.argv`` and print the result."""
    output, exit_code = run(sys.argv)
    print(output)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
