"""LintRunner — orchestrates loading the corpus and running the checkers."""

import asyncio
import time
import uuid
from collections.abc import Awaitable, Callable
from functools import partial
from pathlib import Path
from typing import TypeAlias

from qa_lint.config.domain.config import LintConfig
from qa_lint.config.domain.roots import RootsConfig
from qa_lint.corpus.domain.document import CorpusDocument, DocRole
from qa_lint.corpus.domain.example_script import ExampleScript
from qa_lint.corpus.domain.loader import CorpusLoader
from qa_lint.lint.domain.example_checker import ExampleChecker
from qa_lint.lint.domain.observer import LintObserver
from qa_lint.lint.domain.pairing_checker import PairingChecker
from qa_lint.lint.domain.reference_checker import ReferenceChecker
from qa_lint.lint.domain.report import LintReport
from qa_lint.lint.domain.schema_checker import SchemaChecker
from qa_lint.lint.domain.violation import Checker, Violation

# Order in which checker results appear in the report.
CHECK_ORDER: list[Checker] = [
    Checker.SCHEMA,
    Checker.PAIRING,
    Checker.EXAMPLES,
    Checker.REFERENCES,
]

LoadedFile: TypeAlias = CorpusDocument | ExampleScript


class LintRunner:
    """Runs the requested checks over one snapshot of the corpus.

    Every file is read concurrently, bounded by ``execution.max_concurrent``.
    Checkers only start once every read has finished, so the final ordering
    never depends on scheduling. Per-file read failures become io-error
    violations; nothing a file contains can abort the run.
    """

    def __init__(
        self,
        config: LintConfig,
        loader: CorpusLoader,
        observer: LintObserver,
    ) -> None:
        self._config = config
        self._loader = loader
        self._observer = observer

    async def run(self, checks: list[Checker], roots: RootsConfig) -> LintReport:
        """Execute the requested checks and return a LintReport.

        Report order: io-errors sorted by file, then each checker's results
        in CHECK_ORDER.
        """
        run_id = str(uuid.uuid4())
        requested = [c for c in CHECK_ORDER if c in checks]

        needs_questions = bool({Checker.SCHEMA, Checker.PAIRING} & set(requested))
        needs_answers = needs_questions or Checker.REFERENCES in requested
        needs_scripts = Checker.EXAMPLES in requested

        jobs: list[Callable[[], Awaitable[LoadedFile]]] = []
        if needs_questions:
            jobs += self._document_jobs(root=roots.questions, role=DocRole.QUESTION)
        if needs_answers:
            jobs += self._document_jobs(root=roots.answers, role=DocRole.ANSWER)
        if needs_scripts:
            jobs += self._script_jobs(root=roots.examples)

        self._observer.scan_started(
            run_id=run_id,
            checks=[str(c) for c in requested],
            total_files=len(jobs),
            max_concurrent=self._config.execution.max_concurrent,
        )
        started_at = time.monotonic()

        try:
            loaded = await self._load_all(run_id=run_id, jobs=jobs)
        except BaseException as exc:
            self._observer.scan_aborted(run_id=run_id, reason=type(exc).__name__)
            raise

        documents = [f for f in loaded if isinstance(f, CorpusDocument)]
        questions = [d for d in documents if d.role == DocRole.QUESTION]
        answers = [d for d in documents if d.role == DocRole.ANSWER]
        scripts = [f for f in loaded if isinstance(f, ExampleScript)]

        violations = _io_violations(files=loaded)
        for checker in requested:
            found = self._run_checker(
                checker=checker,
                questions=questions,
                answers=answers,
                scripts=scripts,
                examples_root=roots.examples,
            )
            self._observer.checker_completed(
                run_id=run_id, checker=str(checker), violations=len(found)
            )
            violations.extend(found)

        report = LintReport(
            run_id=run_id,
            checks=requested,
            files_scanned=len(loaded),
            violations=violations,
        )
        self._observer.scan_completed(
            run_id=run_id,
            total_violations=len(violations),
            error_count=report.error_count,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return report

    def _document_jobs(
        self, root: Path, role: DocRole
    ) -> list[Callable[[], Awaitable[LoadedFile]]]:
        return [
            partial(self._loader.load_document, path=path, root=root, role=role)
            for path in self._loader.discover_documents(root=root)
        ]

    def _script_jobs(self, root: Path) -> list[Callable[[], Awaitable[LoadedFile]]]:
        return [
            partial(self._loader.load_script, path=path, root=root)
            for path in self._loader.discover_scripts(root=root)
        ]

    async def _load_all(
        self,
        run_id: str,
        jobs: list[Callable[[], Awaitable[LoadedFile]]],
    ) -> list[LoadedFile]:
        """Run every load job concurrently and wait for all of them."""
        results: list[LoadedFile] = []
        sem = asyncio.Semaphore(self._config.execution.max_concurrent)
        completed_count: list[int] = [0]
        progress_lock = asyncio.Lock()

        async def load_one(job: Callable[[], Awaitable[LoadedFile]]) -> None:
            async with sem:
                loaded = await job()
            results.append(loaded)
            if loaded.read_error is not None:
                self._observer.file_failed(
                    run_id=run_id, path=loaded.file, reason=loaded.read_error
                )
            async with progress_lock:
                completed_count[0] += 1
                self._observer.file_processed(
                    run_id=run_id,
                    path=loaded.file,
                    completed=completed_count[0],
                    total=len(jobs),
                )

        async with asyncio.TaskGroup() as tg:
            for job in jobs:
                tg.create_task(load_one(job))

        return results

    def _run_checker(
        self,
        checker: Checker,
        questions: list[CorpusDocument],
        answers: list[CorpusDocument],
        scripts: list[ExampleScript],
        examples_root: Path,
    ) -> list[Violation]:
        if checker == Checker.SCHEMA:
            return SchemaChecker().check(documents=questions + answers)
        if checker == Checker.PAIRING:
            return PairingChecker(levels=self._config.levels).check(
                questions=questions, answers=answers
            )
        if checker == Checker.EXAMPLES:
            return ExampleChecker(config=self._config.examples).check(scripts=scripts)
        known_files = {
            path.relative_to(examples_root).as_posix()
            for path in self._loader.discover_files(root=examples_root)
        }
        # Also match the configured root name, e.g. "examples" under --examples .
        dir_names = {examples_root.resolve().name, self._config.roots.examples.name}
        return ReferenceChecker(
            examples_dir_names=dir_names, known_files=known_files
        ).check(answers=answers)


def _io_violations(files: list[LoadedFile]) -> list[Violation]:
    failed = sorted(
        (f for f in files if f.read_error is not None), key=lambda f: f.file
    )
    return [
        Violation(file=f.file, reason=f"io-error: {f.read_error}", checker=Checker.IO)
        for f in failed
    ]
