"""Line-oriented Markdown parser for question and answer documents.

Only the structure qa-lint cares about is recognised: ATX headings, numbered
item markers and fenced code blocks. Fence contents are opaque, so a Ruby
``# comment`` inside a code block is never mistaken for a heading.
"""

import re
from dataclasses import dataclass, field

from qa_lint.corpus.domain.document import DocItem, ParsedMarkdown

_HEADING = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})")


@dataclass
class _OpenItem:
    number: int
    line: int
    body: list[str] = field(default_factory=list)
    code_blocks: int = 0

    def close(self) -> DocItem:
        return DocItem(
            number=self.number,
            line=self.line,
            end_line=self.line + len(self.body) if self.body else self.line,
            body=self.body,
            code_blocks=self.code_blocks,
        )


@dataclass
class _Fence:
    char: str
    length: int

    def closes(self, marker: str) -> bool:
        return marker[0] == self.char and len(marker) >= self.length


def parse_markdown(text: str, item_pattern: str) -> ParsedMarkdown:
    """Parse document text into its top-level heading and numbered items.

    The heading is the first non-blank line when it is a level-1 ATX heading,
    otherwise None. An item runs from its marker line to the line before the
    next item marker or the next level-1/level-2 heading.

    Marker lines whose captured number is not a non-negative integer (absent,
    not digits, or too long to convert) are listed in ``unreadable_markers``
    and end the current item without starting a new one.
    """
    item_re = re.compile(item_pattern)
    lines = text.lstrip("\ufeff").splitlines()

    heading: str | None = None
    items: list[DocItem] = []
    current: _OpenItem | None = None
    fence: _Fence | None = None
    seen_content = False
    unreadable: list[int] = []

    for index, line in enumerate(lines, start=1):
        fence_match = _FENCE.match(line)

        if fence is not None:
            if fence_match and fence.closes(fence_match.group(1)):
                fence = None
            if current is not None:
                current.body.append(line)
            continue

        if fence_match:
            marker = fence_match.group(1)
            fence = _Fence(char=marker[0], length=len(marker))
            seen_content = True
            if current is not None:
                current.body.append(line)
                current.code_blocks += 1
            continue

        heading_match = _HEADING.match(line)
        if not seen_content and line.strip():
            seen_content = True
            if heading_match and len(heading_match.group(1)) == 1:
                heading = (heading_match.group(2) or "").strip() or None

        item_match = item_re.match(line)
        if item_match:
            if current is not None:
                items.append(current.close())
                current = None
            number = _item_number(item_match.group(1))
            if number is None:
                unreadable.append(index)
            else:
                current = _OpenItem(number=number, line=index)
            continue

        if heading_match and len(heading_match.group(1)) <= 2:
            if current is not None:
                items.append(current.close())
                current = None
            continue

        if current is not None:
            current.body.append(line)

    if current is not None:
        items.append(current.close())

    return ParsedMarkdown(
        heading=heading, items=items, unreadable_markers=unreadable
    )


def _item_number(captured: str | None) -> int | None:
    """Convert a captured item number, or None if it is not a usable integer."""
    if captured is None:
        return None
    try:
        number = int(captured)
    except ValueError:
        return None
    return number if number >= 0 else None
