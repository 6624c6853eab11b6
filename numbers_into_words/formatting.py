"""
Plain-text rendering of a ``ConversionReport`` for the terminal.

Output layout (each part present only when it applies):

    <help text>
    ---
    <value>: <words>
    ...

    Errors
    -----
    <message>
"""

from __future__ import annotations

from .grouper import to_words
from .models import DEFAULT_POLICY, MAX_VALUE, ConjunctionPolicy, ConversionReport
from .pipeline import ConversionPipeline

TITLE = "numbers_into_words: Converts non-negative integers to words"
EXAMPLE_INPUTS: tuple[str, ...] = ("234", "92,582,349", "543_953_459_343", "8")

_RULE = "-" * 55


def render_report(report: ConversionReport, prog_name: str) -> str:
    """Render the report exactly as the command-line program prints it."""
    if not report.has_arguments:
        return f"No arguments. Try this:\n$ {prog_name} help"

    parts: list[str] = []
    if report.help_requested:
        parts.append(help_text(prog_name, report.policy))
        if report.conversions:
            parts.append("\n---\n\n")

    parts.extend(f"{c.value}: {c.words}\n" for c in report.conversions)

    if report.conversions and report.errors:
        parts.append("\n")
    if report.errors:
        parts.append("Errors\n-----\n" + "\n".join(e.message for e in report.errors))

    return "".join(parts)


def help_text(prog_name: str, policy: ConjunctionPolicy = DEFAULT_POLICY) -> str:
    """Usage text, with a live example session and the maximum value."""
    return (
        f"{TITLE}\n"
        f"{_RULE}\n"
        "\n"
        "Usage:\n"
        f"$ {prog_name} (<number> | help) [<number> | help] ... \n"
        "\n"
        "Options:\n"
        f"  --and=<none|last|below1k|all>  where to place \"and\" (current: {policy.value})\n"
        "\n"
        "Example:\n"
        "\n"
        f"{example_session(EXAMPLE_INPUTS, prog_name, policy)}\n"
        f"Note: maximum value supported is {MAX_VALUE} ({to_words(MAX_VALUE, policy)})"
    )


def example_session(
    inputs: tuple[str, ...] | list[str],
    prog_name: str,
    policy: ConjunctionPolicy = DEFAULT_POLICY,
) -> str:
    """Show a command line followed by the output it really produces."""
    command_line = " ".join([prog_name, *inputs])
    report = ConversionPipeline(default_policy=policy).run(inputs)
    return f"$ {command_line}\n{render_report(report, prog_name)}"
