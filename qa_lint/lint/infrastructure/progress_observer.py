"""ProgressLintObserver — renders a Rich progress bar for the file scan on stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressLintObserver:
    """Shows one bar that advances as each corpus file is read.

    Only scan_started, file_processed, scan_completed and scan_aborted touch
    the display; all other events are no-ops. The bar is stopped on both
    completion and abort so the live display never outlives the scan.

    Pass ``disabled=True`` to keep the counters without drawing anything
    (useful in tests).

    Does NOT inherit from LintObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self.completed = 0
        self.total = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def scan_started(
        self,
        run_id: str,
        checks: list[str],
        total_files: int,
        max_concurrent: int,
    ) -> None:
        # Reset state from any previous run.
        self.completed = 0
        self.total = total_files
        self._progress = None
        self._task_id = None

        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("[bold]Scanning[/bold] {task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=True,
        )
        self._task_id = self._progress.add_task(
            description=", ".join(checks), total=float(total_files)
        )
        self._progress.start()

    def file_processed(
        self,
        run_id: str,
        path: str,
        completed: int,
        total: int,
    ) -> None:
        self.completed = completed
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=completed)

    def file_failed(self, run_id: str, path: str, reason: str) -> None:
        pass

    def checker_completed(
        self,
        run_id: str,
        checker: str,
        violations: int,
    ) -> None:
        pass

    def scan_completed(
        self,
        run_id: str,
        total_violations: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def scan_aborted(self, run_id: str, reason: str) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
