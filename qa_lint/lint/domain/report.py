"""LintReport — the aggregate result of a completed lint run."""

from pydantic import BaseModel, Field

from qa_lint.lint.domain.violation import Checker, Severity, Violation


class LintReport(BaseModel, frozen=True):
    """Immutable summary returned when a lint run completes.

    Violations are already in their final deterministic order.
    """

    run_id: str = Field(min_length=1)
    checks: list[Checker]
    files_scanned: int = Field(ge=0)
    violations: list[Violation]

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def info_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.INFO)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0
