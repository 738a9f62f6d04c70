"""Corpus document value objects — question and answer Markdown files."""

from enum import StrEnum

from pydantic import BaseModel, Field


class DocRole(StrEnum):
    QUESTION = "question"
    ANSWER = "answer"


class DocKey(BaseModel, frozen=True):
    """Pairing key shared by a question document and its answer document."""

    level: str = Field(min_length=1)
    topic: str = Field(min_length=1)

    def sort_key(self) -> tuple[str, str]:
        return (self.level, self.topic)


class DocItem(BaseModel, frozen=True):
    """One numbered prompt (or answer) inside a document.

    Line numbers are 1-based. ``end_line`` is the last line that belongs to
    the item's body, or ``line`` itself when the body is empty.
    """

    number: int = Field(ge=0)
    line: int = Field(ge=1)
    end_line: int = Field(ge=1)
    body: list[str]
    code_blocks: int = Field(default=0, ge=0)

    @property
    def has_body(self) -> bool:
        return any(text.strip() for text in self.body)


class ParsedMarkdown(BaseModel, frozen=True):
    heading: str | None
    items: list[DocItem]
    unreadable_markers: list[int] = Field(default_factory=list)


class CorpusDocument(BaseModel, frozen=True):
    """A question or answer file after reading and parsing.

    ``file`` is the display path (root as given plus the path below it).
    ``key`` is None when the file does not sit in a known level directory.
    ``read_error`` is set when the file could not be read; such documents
    carry no heading and no items. ``unreadable_markers`` holds the line
    numbers of item markers whose number could not be read.
    """

    file: str
    relative_path: str
    role: DocRole
    level: str | None
    topic: str
    key: DocKey | None
    heading: str | None = None
    items: list[DocItem] = Field(default_factory=list)
    unreadable_markers: list[int] = Field(default_factory=list)
    text: str = ""
    read_error: str | None = None

    @property
    def item_numbers(self) -> set[int]:
        return {item.number for item in self.items}

    def item_at(self, line: int) -> DocItem | None:
        """Return the item whose marker or body covers the 1-based line."""
        for item in self.items:
            if item.line <= line <= item.end_line:
                return item
        return None
