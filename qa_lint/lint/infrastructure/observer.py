"""StructlogLintObserver — production observer that delegates to structlog."""

import structlog


class StructlogLintObserver:
    """Logs lint domain events to structlog.

    Does NOT inherit from LintObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scan_started(
        self,
        run_id: str,
        checks: list[str],
        total_files: int,
        max_concurrent: int,
    ) -> None:
        self._log.info(
            "lint.scan_started",
            run_id=run_id,
            checks=checks,
            total_files=total_files,
            max_concurrent=max_concurrent,
        )

    def file_processed(
        self,
        run_id: str,
        path: str,
        completed: int,
        total: int,
    ) -> None:
        self._log.debug(
            "lint.file_processed",
            run_id=run_id,
            path=path,
            completed=completed,
            total=total,
        )

    def file_failed(self, run_id: str, path: str, reason: str) -> None:
        self._log.warning("lint.file_failed", run_id=run_id, path=path, reason=reason)

    def checker_completed(
        self,
        run_id: str,
        checker: str,
        violations: int,
    ) -> None:
        self._log.info(
            "lint.checker_completed",
            run_id=run_id,
            checker=checker,
            violations=violations,
        )

    def scan_completed(
        self,
        run_id: str,
        total_violations: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "lint.scan_completed",
            run_id=run_id,
            total_violations=total_violations,
            error_count=error_count,
            elapsed_seconds=round(elapsed_seconds, 3),
        )

    def scan_aborted(self, run_id: str, reason: str) -> None:
        self._log.warning("lint.scan_aborted", run_id=run_id, reason=reason)
