"""Text and JSON rendering of a LintReport."""

import json

from qa_lint.lint.domain.report import LintReport
from qa_lint.lint.domain.violation import Violation


def format_violation(violation: Violation) -> str:
    """Render one violation as ``<file>:<item-or-blank>: <reason>``.

    A detail, when present, is appended in parentheses.
    """
    item = "" if violation.item is None else str(violation.item)
    line = f"{violation.file}:{item}: {violation.reason}"
    if violation.detail:
        line += f" ({violation.detail})"
    return line


def build_text_lines(report: LintReport) -> list[str]:
    return [format_violation(v) for v in report.violations]


def build_json(report: LintReport) -> str:
    """Serialise the violations as a JSON array, preserving report order."""
    records = [v.to_record() for v in report.violations]
    return json.dumps(records, indent=2)


def summary_line(report: LintReport) -> str:
    total = len(report.violations)
    if total == 0:
        return "no violations found"
    noun = "violation" if total == 1 else "violations"
    line = f"{total} {noun} found"
    if report.info_count:
        line += f" ({report.info_count} informational)"
    return line
