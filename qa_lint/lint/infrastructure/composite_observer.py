"""CompositeLintObserver — fans out all events to a list of observers."""

from qa_lint.lint.domain.observer import LintObserver


class CompositeLintObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from LintObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[LintObserver]) -> None:
        self._observers = observers

    def scan_started(
        self,
        run_id: str,
        checks: list[str],
        total_files: int,
        max_concurrent: int,
    ) -> None:
        for obs in self._observers:
            obs.scan_started(
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
        for obs in self._observers:
            obs.file_processed(
                run_id=run_id,
                path=path,
                completed=completed,
                total=total,
            )

    def file_failed(self, run_id: str, path: str, reason: str) -> None:
        for obs in self._observers:
            obs.file_failed(run_id=run_id, path=path, reason=reason)

    def checker_completed(
        self,
        run_id: str,
        checker: str,
        violations: int,
    ) -> None:
        for obs in self._observers:
            obs.checker_completed(
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
        for obs in self._observers:
            obs.scan_completed(
                run_id=run_id,
                total_violations=total_violations,
                error_count=error_count,
                elapsed_seconds=elapsed_seconds,
            )

    def scan_aborted(self, run_id: str, reason: str) -> None:
        for obs in self._observers:
            obs.scan_aborted(run_id=run_id, reason=reason)
