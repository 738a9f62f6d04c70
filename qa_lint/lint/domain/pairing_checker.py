"""Pairing checker — question files against answer files, prompt by prompt."""

from qa_lint.corpus.domain.document import CorpusDocument, DocKey
from qa_lint.lint.domain.violation import Checker, Severity, Violation

ORPHAN_QUESTION = "orphan question"
ORPHAN_ANSWER = "orphan answer"


class PairingChecker:
    """Matches question and answer documents by (level, normalized topic).

    Results come in three deterministic groups:

    1. structural problems (orphans, unknown levels, duplicate keys) sorted
       by file path;
    2. unanswered prompts sorted by level, topic, number;
    3. informational answer-only prompts in the same order.

    Unreadable documents still occupy their key, so their partner is not
    reported as an orphan, but they are never orphans themselves and are not
    compared prompt by prompt.
    """

    def __init__(self, levels: list[str]) -> None:
        self._levels = levels

    def check(
        self,
        questions: list[CorpusDocument],
        answers: list[CorpusDocument],
    ) -> list[Violation]:
        structural: list[Violation] = []
        question_index = self._index(documents=questions, structural=structural)
        answer_index = self._index(documents=answers, structural=structural)

        for key in question_index.keys() - answer_index.keys():
            doc = question_index[key]
            if doc.read_error is not None:
                continue
            structural.append(
                Violation(
                    file=doc.file,
                    reason=ORPHAN_QUESTION,
                    checker=Checker.PAIRING,
                    detail=f"no answer file for topic {key.topic}, level {key.level}",
                )
            )
        for key in answer_index.keys() - question_index.keys():
            doc = answer_index[key]
            if doc.read_error is not None:
                continue
            structural.append(
                Violation(
                    file=doc.file,
                    reason=ORPHAN_ANSWER,
                    checker=Checker.PAIRING,
                    detail=f"no question file for topic {key.topic}, level {key.level}",
                )
            )
        structural.sort(key=lambda v: (v.file, v.reason))

        unanswered: list[Violation] = []
        unmatched: list[Violation] = []
        shared = sorted(
            question_index.keys() & answer_index.keys(), key=DocKey.sort_key
        )
        for key in shared:
            question = question_index[key]
            answer = answer_index[key]
            if question.read_error is not None or answer.read_error is not None:
                continue
            asked = question.item_numbers
            answered = answer.item_numbers
            for number in sorted(asked - answered):
                unanswered.append(
                    Violation(
                        file=question.file,
                        item=number,
                        reason=(
                            f"unanswered prompt {number} in topic {key.topic},"
                            f" level {key.level}"
                        ),
                        checker=Checker.PAIRING,
                    )
                )
            for number in sorted(answered - asked):
                unmatched.append(
                    Violation(
                        file=answer.file,
                        item=number,
                        reason=(
                            f"unmatched answer prompt {number} in topic {key.topic},"
                            f" level {key.level}"
                        ),
                        checker=Checker.PAIRING,
                        severity=Severity.INFO,
                    )
                )

        return structural + unanswered + unmatched

    def _index(
        self,
        documents: list[CorpusDocument],
        structural: list[Violation],
    ) -> dict[DocKey, CorpusDocument]:
        index: dict[DocKey, CorpusDocument] = {}
        for doc in sorted(documents, key=lambda d: d.file):
            if doc.key is None:
                structural.append(
                    Violation(
                        file=doc.file,
                        reason=self._placement_reason(doc=doc),
                        checker=Checker.PAIRING,
                        detail=f"levels: {', '.join(self._levels)}",
                    )
                )
                continue
            if doc.key in index:
                structural.append(
                    Violation(
                        file=doc.file,
                        reason="duplicate topic key",
                        checker=Checker.PAIRING,
                        detail=(
                            f"{doc.key.level}/{doc.key.topic} already used by"
                            f" {index[doc.key].file}"
                        ),
                    )
                )
                continue
            index[doc.key] = doc
        return index

    def _placement_reason(self, doc: CorpusDocument) -> str:
        if doc.level is None:
            return "document outside a level directory"
        if doc.level not in self._levels:
            return f"unknown level '{doc.level}'"
        return "empty topic name"
