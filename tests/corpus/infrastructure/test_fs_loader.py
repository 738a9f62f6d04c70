"""Tests for the filesystem corpus loader."""

from pathlib import Path

from qa_lint.config.domain.config import LintConfig
from qa_lint.corpus.domain.document import DocKey, DocRole
from qa_lint.corpus.domain.example_script import ScriptKind
from qa_lint.corpus.infrastructure.fs_loader import FileSystemCorpusLoader
from tests.corpus.builders import numbered_doc, write_tree


def _loader() -> FileSystemCorpusLoader:
    return FileSystemCorpusLoader(config=LintConfig())


class TestDiscovery:
    """Discovery is recursive, filtered and deterministically ordered."""

    def test_documents_sorted_by_relative_path(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            {"intermediate/b.md": "", "beginner/z.md": "", "beginner/a.md": ""},
        )

        found = _loader().discover_documents(root=tmp_path)

        assert [p.relative_to(tmp_path).as_posix() for p in found] == [
            "beginner/a.md",
            "beginner/z.md",
            "intermediate/b.md",
        ]

    def test_documents_only_markdown(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"beginner/a.md": "", "beginner/notes.txt": ""})

        found = _loader().discover_documents(root=tmp_path)

        assert [p.name for p in found] == ["a.md"]

    def test_hidden_entries_skipped(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {".git/x.md": "", "beginner/.draft.md": "", "beginner/a.md": ""})

        found = _loader().discover_documents(root=tmp_path)

        assert [p.name for p in found] == ["a.md"]

    def test_scripts_filtered_by_suffix(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"snippets/a.rb": "", "snippets/README.md": ""})

        found = _loader().discover_scripts(root=tmp_path)

        assert [p.name for p in found] == ["a.rb"]

    def test_discover_files_returns_everything_visible(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"snippets/a.rb": "", "rails/README.md": ""})

        found = _loader().discover_files(root=tmp_path)

        assert len(found) == 2


class TestLoadDocument:
    """Documents are read, located and parsed."""

    async def test_parses_heading_and_items(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"beginner/Closures.md": numbered_doc("Closures", [1, 2])})

        doc = await _loader().load_document(
            path=tmp_path / "beginner/Closures.md", root=tmp_path, role=DocRole.QUESTION
        )

        assert doc.heading == "Closures"
        assert doc.item_numbers == {1, 2}
        assert doc.key == DocKey(level="beginner", topic="closures")
        assert doc.relative_path == "beginner/Closures.md"
        assert doc.read_error is None

    async def test_file_is_display_path(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"beginner/x.md": "# X\n"})
        path = tmp_path / "beginner/x.md"

        doc = await _loader().load_document(path=path, root=tmp_path, role=DocRole.ANSWER)

        assert doc.file == path.as_posix()
        assert doc.role == DocRole.ANSWER

    async def test_invalid_utf8_becomes_read_error(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"beginner/x.md": b"# X\n\xff\xfe\xfa"})

        doc = await _loader().load_document(
            path=tmp_path / "beginner/x.md", root=tmp_path, role=DocRole.QUESTION
        )

        assert doc.read_error is not None
        assert "UTF-8" in doc.read_error
        assert doc.items == []
        assert doc.key == DocKey(level="beginner", topic="x")

    async def test_missing_file_becomes_read_error(self, tmp_path: Path) -> None:
        doc = await _loader().load_document(
            path=tmp_path / "beginner/gone.md", root=tmp_path, role=DocRole.QUESTION
        )

        assert doc.read_error is not None


class TestLoadScript:
    """Scripts are classified by directory and checked for a self-run guard."""

    async def test_snippet_is_dependency_free(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"snippets/a.rb": "puts 1\n"})

        script = await _loader().load_script(path=tmp_path / "snippets/a.rb", root=tmp_path)

        assert script.kind == ScriptKind.DEPENDENCY_FREE
        assert script.text == "puts 1\n"

    async def test_rails_is_framework_dependent(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"rails/a.rb": ""})

        script = await _loader().load_script(path=tmp_path / "rails/a.rb", root=tmp_path)

        assert script.kind == ScriptKind.FRAMEWORK_DEPENDENT

    async def test_other_location_is_unclassified(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"a.rb": "", "misc/b.rb": ""})
        loader = _loader()

        top = await loader.load_script(path=tmp_path / "a.rb", root=tmp_path)
        misc = await loader.load_script(path=tmp_path / "misc/b.rb", root=tmp_path)

        assert top.kind == ScriptKind.UNCLASSIFIED
        assert misc.kind == ScriptKind.UNCLASSIFIED

    async def test_self_executable_guard_detected(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            {"rails/service.rb": "class A; end\n\nif __FILE__ == $0\n  A.new\nend\n"},
        )

        script = await _loader().load_script(
            path=tmp_path / "rails/service.rb", root=tmp_path
        )

        assert script.self_executable is True

    async def test_plain_script_not_self_executable(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"snippets/a.rb": "puts 1\n"})

        script = await _loader().load_script(path=tmp_path / "snippets/a.rb", root=tmp_path)

        assert script.self_executable is False
