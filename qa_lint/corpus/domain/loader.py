"""CorpusLoader Protocol — structural interface for discovering and reading corpus files."""

from pathlib import Path
from typing import Protocol

from qa_lint.corpus.domain.document import CorpusDocument, DocRole
from qa_lint.corpus.domain.example_script import ExampleScript


class CorpusLoader(Protocol):
    """Finds corpus files below a root and reads them one at a time.

    ``load_document`` and ``load_script`` never raise for unreadable files;
    they return the value object with ``read_error`` set instead.
    """

    def discover_documents(self, root: Path) -> list[Path]: ...

    def discover_scripts(self, root: Path) -> list[Path]: ...

    def discover_files(self, root: Path) -> list[Path]: ...

    async def load_document(
        self, path: Path, root: Path, role: DocRole
    ) -> CorpusDocument: ...

    async def load_script(self, path: Path, root: Path) -> ExampleScript: ...
