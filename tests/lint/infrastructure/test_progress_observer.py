"""Tests for ProgressLintObserver in disabled mode."""

from qa_lint.lint.infrastructure.progress_observer import ProgressLintObserver


def _start(observer: ProgressLintObserver, total_files: int = 3) -> None:
    observer.scan_started(
        run_id="r", checks=["schema"], total_files=total_files, max_concurrent=2
    )


class TestProgressLintObserverCounters:
    """Counters track the scan even when nothing is drawn."""

    def test_total_set_on_start(self) -> None:
        observer = ProgressLintObserver(disabled=True)

        _start(observer, total_files=5)

        assert observer.total == 5
        assert observer.completed == 0

    def test_completed_follows_file_processed(self) -> None:
        observer = ProgressLintObserver(disabled=True)
        _start(observer)

        observer.file_processed(run_id="r", path="a.md", completed=1, total=3)
        observer.file_processed(run_id="r", path="b.md", completed=2, total=3)

        assert observer.completed == 2

    def test_restart_resets_counters(self) -> None:
        observer = ProgressLintObserver(disabled=True)
        _start(observer)
        observer.file_processed(run_id="r", path="a.md", completed=1, total=3)
        observer.scan_completed(
            run_id="r", total_violations=0, error_count=0, elapsed_seconds=0.1
        )

        _start(observer, total_files=7)

        assert observer.completed == 0
        assert observer.total == 7

    def test_other_events_are_no_ops(self) -> None:
        observer = ProgressLintObserver(disabled=True)
        _start(observer)

        observer.file_failed(run_id="r", path="a.md", reason="boom")
        observer.checker_completed(run_id="r", checker="schema", violations=1)

        assert observer.completed == 0


class TestProgressLintObserverDisplay:
    """The live display is stopped however the scan ends."""

    def test_abort_stops_display(self) -> None:
        observer = ProgressLintObserver()
        _start(observer)
        assert observer._progress is not None

        observer.scan_aborted(run_id="r", reason="KeyboardInterrupt")

        assert observer._progress is None

    def test_completion_stops_display(self) -> None:
        observer = ProgressLintObserver()
        _start(observer)

        observer.scan_completed(
            run_id="r", total_violations=0, error_count=0, elapsed_seconds=0.1
        )

        assert observer._progress is None

    def test_abort_without_start_is_a_no_op(self) -> None:
        observer = ProgressLintObserver(disabled=True)

        observer.scan_aborted(run_id="r", reason="KeyboardInterrupt")

        assert observer.completed == 0
