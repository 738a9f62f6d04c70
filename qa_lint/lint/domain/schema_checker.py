"""Document schema checker — heading, numbered items and item bodies."""

from qa_lint.corpus.domain.document import CorpusDocument
from qa_lint.lint.domain.violation import Checker, Violation

HEADING_MISSING = "heading missing"
NO_NUMBERED_ITEMS = "no numbered items"
UNREADABLE_ITEM_NUMBER = "item number unreadable"


class SchemaChecker:
    """Checks that every readable document has the required shape.

    Never raises for malformed content: every problem becomes a Violation.
    Unreadable documents are skipped here; the runner reports them once as
    io-errors.
    """

    def check(self, documents: list[CorpusDocument]) -> list[Violation]:
        violations: list[Violation] = []
        for doc in sorted(documents, key=lambda d: d.file):
            if doc.read_error is None:
                violations.extend(self._check_document(doc=doc))
        return violations

    def _check_document(self, doc: CorpusDocument) -> list[Violation]:
        violations: list[Violation] = []
        if doc.heading is None:
            violations.append(
                Violation(file=doc.file, reason=HEADING_MISSING, checker=Checker.SCHEMA)
            )

        for line in doc.unreadable_markers:
            violations.append(
                Violation(
                    file=doc.file,
                    reason=UNREADABLE_ITEM_NUMBER,
                    checker=Checker.SCHEMA,
                    detail=f"line {line}",
                )
            )

        if not doc.items:
            violations.append(
                Violation(
                    file=doc.file, reason=NO_NUMBERED_ITEMS, checker=Checker.SCHEMA
                )
            )
            return violations

        seen: set[int] = set()
        for item in doc.items:
            if item.number in seen:
                violations.append(
                    Violation(
                        file=doc.file,
                        item=item.number,
                        reason=f"item {item.number} is duplicated",
                        checker=Checker.SCHEMA,
                        detail=f"line {item.line}",
                    )
                )
            seen.add(item.number)

            if not item.has_body:
                violations.append(
                    Violation(
                        file=doc.file,
                        item=item.number,
                        reason=f"item {item.number} has empty body",
                        checker=Checker.SCHEMA,
                        detail=f"line {item.line}",
                    )
                )
        return violations
