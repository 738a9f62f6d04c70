"""Filesystem corpus loader — discovers corpus files and reads them off the event loop."""

import asyncio
import re
from pathlib import Path, PurePosixPath

from qa_lint.config.domain.config import LintConfig
from qa_lint.corpus.domain.document import CorpusDocument, DocRole
from qa_lint.corpus.domain.example_script import ExampleScript, ScriptKind
from qa_lint.corpus.domain.topic import locate
from qa_lint.corpus.infrastructure.markdown_parser import parse_markdown

_DOCUMENT_SUFFIX = ".md"


class FileSystemCorpusLoader:
    """Reads question, answer and example files from disk.

    Discovery returns paths sorted by their root-relative POSIX form, so two
    runs over an unchanged tree see the same files in the same order. Hidden
    files and directories (leading ``.``) are skipped.

    Satisfies the CorpusLoader protocol structurally.
    """

    def __init__(self, config: LintConfig) -> None:
        self._config = config
        self._self_executable = re.compile(
            config.examples.self_executable_pattern, re.MULTILINE
        )

    def discover_documents(self, root: Path) -> list[Path]:
        return [
            path
            for path in self.discover_files(root=root)
            if path.suffix.lower() == _DOCUMENT_SUFFIX
        ]

    def discover_scripts(self, root: Path) -> list[Path]:
        suffixes = {suffix.lower() for suffix in self._config.examples.suffixes}
        return [
            path
            for path in self.discover_files(root=root)
            if path.suffix.lower() in suffixes
        ]

    def discover_files(self, root: Path) -> list[Path]:
        found = [
            path
            for path in root.rglob("*")
            if path.is_file() and not _is_hidden(path=path, root=root)
        ]
        return sorted(found, key=lambda p: p.relative_to(root).as_posix())

    async def load_document(
        self, path: Path, root: Path, role: DocRole
    ) -> CorpusDocument:
        relative = PurePosixPath(path.relative_to(root).as_posix())
        level, topic, key = locate(
            relative_path=relative,
            levels=self._config.levels,
            config=self._config.normalization,
        )
        base = {
            "file": path.as_posix(),
            "relative_path": relative.as_posix(),
            "role": role,
            "level": level,
            "topic": topic,
            "key": key,
        }

        try:
            text = await _read_text(path=path)
        except (OSError, UnicodeDecodeError) as exc:
            return CorpusDocument(**base, read_error=_describe(exc))

        parsed = parse_markdown(
            text=text, item_pattern=self._config.schema_rules.item_pattern
        )
        return CorpusDocument(
            **base,
            heading=parsed.heading,
            items=parsed.items,
            unreadable_markers=parsed.unreadable_markers,
            text=text,
        )

    async def load_script(self, path: Path, root: Path) -> ExampleScript:
        relative = path.relative_to(root).as_posix()
        kind = self._classify(relative_path=relative)

        try:
            text = await _read_text(path=path)
        except (OSError, UnicodeDecodeError) as exc:
            return ExampleScript(
                file=path.as_posix(),
                relative_path=relative,
                kind=kind,
                read_error=_describe(exc),
            )

        return ExampleScript(
            file=path.as_posix(),
            relative_path=relative,
            kind=kind,
            text=text,
            self_executable=bool(self._self_executable.search(text)),
        )

    def _classify(self, relative_path: str) -> ScriptKind:
        first = relative_path.split("/", 1)[0] if "/" in relative_path else ""
        if first == self._config.examples.dependency_free_dir:
            return ScriptKind.DEPENDENCY_FREE
        if first == self._config.examples.framework_dir:
            return ScriptKind.FRAMEWORK_DEPENDENT
        return ScriptKind.UNCLASSIFIED


async def _read_text(path: Path) -> str:
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def _describe(exc: Exception) -> str:
    if isinstance(exc, UnicodeDecodeError):
        return f"not valid UTF-8: {exc.reason} at byte {exc.start}"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
