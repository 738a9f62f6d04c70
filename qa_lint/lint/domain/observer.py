"""Observer port for the lint domain — defines events in domain language."""

from typing import Protocol


class LintObserver(Protocol):
    """Observer port emitting structured events during a lint run.

    Implementations may log to structlog, draw progress, or record for tests.
    """

    def scan_started(
        self,
        run_id: str,
        checks: list[str],
        total_files: int,
        max_concurrent: int,
    ) -> None: ...

    def file_processed(
        self,
        run_id: str,
        path: str,
        completed: int,
        total: int,
    ) -> None: ...

    def file_failed(self, run_id: str, path: str, reason: str) -> None: ...

    def checker_completed(
        self,
        run_id: str,
        checker: str,
        violations: int,
    ) -> None: ...

    def scan_completed(
        self,
        run_id: str,
        total_violations: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None: ...

    def scan_aborted(self, run_id: str, reason: str) -> None: ...
