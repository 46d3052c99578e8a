"""Report generation."""

from __future__ import annotations

from nofocus.models import Failure, FileReport
from nofocus.rule import RULE_NAME


def count_failures(reports: list[FileReport]) -> int:
    return sum(len(r.failures) for r in reports)


def format_failure(path: str, failure: Failure) -> str:
    """One line per failure: 'ERROR: (no-focused-tests) src/a.spec.ts:3:1 - message'."""
    start = failure.range.start
    return f"ERROR: ({RULE_NAME}) {path}:{start.line}:{start.column} - {failure.message}"


def format_text(reports: list[FileReport]) -> str:
    lines = [format_failure(r.path, f) for r in reports for f in r.failures]
    return "\n".join(lines)


def format_summary(reports: list[FileReport]) -> str:
    """Short closing line for the CLI."""
    total = count_failures(reports)
    if not total:
        return f"No focused tests in {len(reports)} files ✓"
    affected = sum(1 for r in reports if r.failures)
    noun = "test" if total == 1 else "tests"
    return f"{total} focused {noun} in {affected} of {len(reports)} files"


def generate_report(reports: list[FileReport], runner: str) -> str:
    """Generate a markdown report grouped by file."""
    lines = [
        f"# Focused Test Report: {runner}",
        "",
        f"- **Files checked**: {len(reports)}",
        f"- **Focused tests**: {count_failures(reports)}",
        "",
    ]

    affected = [r for r in reports if r.failures]
    if not affected:
        lines.append("No focused tests. Looking good!")
        lines.append("")
        return "\n".join(lines)

    for report in affected:
        lines.append(f"## `{report.path}` ({len(report.failures)})")
        lines.append("")
        for f in report.failures:
            lines.append(f"- line {f.range.start.line}: `{f.callee}` - {f.message}")
        lines.append("")

    return "\n".join(lines)
