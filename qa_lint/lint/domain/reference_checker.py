"""Example-reference checker — answer documents pointing at example scripts."""

import re
from pathlib import PurePosixPath

from qa_lint.corpus.domain.document import CorpusDocument
from qa_lint.lint.domain.violation import Checker, Violation

REFERENCE_NOT_FOUND = "referenced example not found"

_LINK_TARGET = re.compile(r"\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
_CODE_SPAN = re.compile(r"`([^`\s]+)`")


class ReferenceChecker:
    """Verifies that example paths mentioned in answers exist.

    A reference is a Markdown link target or an inline code span containing
    a path segment equal to one of the examples directory names, e.g.
    ``examples/snippets/blocks_examples.rb`` or
    ``../../examples/rails/callbacks_example.rb``. The part after that
    segment is looked up among the files found below the examples root.
    URLs and bare mentions of the directory itself are ignored.
    """

    def __init__(self, examples_dir_names: set[str], known_files: set[str]) -> None:
        self._dir_names = {name for name in examples_dir_names if name}
        self._known_files = known_files
        self._known_dirs = {
            str(parent)
            for path in known_files
            for parent in PurePosixPath(path).parents
            if str(parent) != "."
        }

    def check(self, answers: list[CorpusDocument]) -> list[Violation]:
        violations: list[Violation] = []
        for doc in sorted(answers, key=lambda d: d.file):
            if doc.read_error is not None:
                continue
            violations.extend(self._check_document(doc=doc))
        return violations

    def _check_document(self, doc: CorpusDocument) -> list[Violation]:
        violations: list[Violation] = []
        for number, line in enumerate(doc.text.splitlines(), start=1):
            for target in self._targets(line=line):
                relative = self._relative_to_examples(target=target)
                if relative is None or self._exists(relative=relative):
                    continue
                item = doc.item_at(line=number)
                violations.append(
                    Violation(
                        file=doc.file,
                        item=item.number if item is not None else None,
                        reason=REFERENCE_NOT_FOUND,
                        checker=Checker.REFERENCES,
                        detail=f"{target} (line {number})",
                    )
                )
        return violations

    def _targets(self, line: str) -> list[str]:
        targets = _LINK_TARGET.findall(line) + _CODE_SPAN.findall(line)
        return [t for t in targets if "://" not in t and not t.startswith("mailto:")]

    def _relative_to_examples(self, target: str) -> str | None:
        """Return the path below the examples root, or None if not a reference."""
        path = target.split("#", 1)[0].split("?", 1)[0]
        parts = PurePosixPath(path).parts
        anchor = next(
            (i for i, part in enumerate(parts) if part in self._dir_names), None
        )
        if anchor is None:
            return None
        rest = parts[anchor + 1 :]
        if not rest:
            return None
        return "/".join(rest)

    def _exists(self, relative: str) -> bool:
        return relative in self._known_files or relative in self._known_dirs
