"""Helpers that build corpus documents, scripts and on-disk trees for tests."""

from pathlib import Path

from qa_lint.config.domain.schema import DEFAULT_ITEM_PATTERN
from qa_lint.corpus.domain.document import CorpusDocument, DocKey, DocRole
from qa_lint.corpus.domain.example_script import ExampleScript, ScriptKind
from qa_lint.corpus.infrastructure.markdown_parser import parse_markdown


def numbered_doc(title: str, numbers: list[int]) -> str:
    """Markdown text with a heading and one non-empty item per number."""
    lines = [f"# {title}", ""]
    for number in numbers:
        lines += [f"### {number}. Prompt {number}", "", f"Body of item {number}.", ""]
    return "\n".join(lines)


def make_document(
    text: str,
    file: str = "questions/beginner/x.md",
    role: DocRole = DocRole.QUESTION,
    level: str | None = "beginner",
    topic: str = "x",
    key: DocKey | None = None,
    read_error: str | None = None,
) -> CorpusDocument:
    if key is None and level is not None and read_error is None:
        key = DocKey(level=level, topic=topic)
    if read_error is not None:
        return CorpusDocument(
            file=file,
            relative_path=file.split("/", 1)[-1],
            role=role,
            level=level,
            topic=topic,
            key=DocKey(level=level, topic=topic) if level else None,
            read_error=read_error,
        )
    parsed = parse_markdown(text=text, item_pattern=DEFAULT_ITEM_PATTERN)
    return CorpusDocument(
        file=file,
        relative_path=file.split("/", 1)[-1],
        role=role,
        level=level,
        topic=topic,
        key=key,
        heading=parsed.heading,
        items=parsed.items,
        unreadable_markers=parsed.unreadable_markers,
        text=text,
    )


def make_script(
    text: str,
    file: str = "examples/snippets/demo.rb",
    kind: ScriptKind = ScriptKind.DEPENDENCY_FREE,
) -> ExampleScript:
    return ExampleScript(
        file=file,
        relative_path=file.split("/", 1)[-1],
        kind=kind,
        text=text,
    )


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    """Write each relative path below root, creating directories as needed."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
