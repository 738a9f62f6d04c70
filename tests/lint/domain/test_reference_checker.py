"""Tests for the example-reference checker."""

from qa_lint.corpus.domain.document import CorpusDocument, DocRole
from qa_lint.lint.domain.reference_checker import REFERENCE_NOT_FOUND, ReferenceChecker
from qa_lint.lint.domain.violation import Checker
from tests.corpus.builders import make_document

_KNOWN = {"snippets/blocks_examples.rb", "rails/callbacks_example.rb"}


def _checker() -> ReferenceChecker:
    return ReferenceChecker(examples_dir_names={"examples"}, known_files=set(_KNOWN))


def _answer(text: str) -> CorpusDocument:
    return make_document(text, file="answers/beginner/x.md", role=DocRole.ANSWER)


class TestResolution:
    """References resolve against files below the examples root."""

    def test_existing_link_target(self) -> None:
        doc = _answer(
            "# X\n### 1. One\nSee [demo](../../examples/snippets/blocks_examples.rb).\n"
        )

        assert _checker().check(answers=[doc]) == []

    def test_existing_code_span(self) -> None:
        doc = _answer("# X\n### 1. One\nRun `examples/rails/callbacks_example.rb`.\n")

        assert _checker().check(answers=[doc]) == []

    def test_directory_reference_accepted(self) -> None:
        doc = _answer("# X\n### 1. One\nBrowse `examples/snippets/`.\n")

        assert _checker().check(answers=[doc]) == []

    def test_missing_file_reported_with_item(self) -> None:
        doc = _answer(
            "# X\n### 1. One\nbody\n### 2. Two\nSee `examples/snippets/gone.rb`.\n"
        )

        violations = _checker().check(answers=[doc])

        assert len(violations) == 1
        assert violations[0].reason == REFERENCE_NOT_FOUND
        assert violations[0].item == 2
        assert violations[0].detail == "examples/snippets/gone.rb (line 5)"
        assert violations[0].checker == Checker.REFERENCES

    def test_reference_before_first_item_has_no_item(self) -> None:
        doc = _answer("# X\nSee `examples/snippets/gone.rb`.\n### 1. One\nbody\n")

        violations = _checker().check(answers=[doc])

        assert violations[0].item is None

    def test_anchor_is_ignored(self) -> None:
        doc = _answer(
            "# X\n### 1. One\n[a](examples/snippets/blocks_examples.rb#L3)\n"
        )

        assert _checker().check(answers=[doc]) == []


class TestDirectoryNames:
    """Any of the given directory names anchors a reference."""

    def test_second_name_is_recognised(self) -> None:
        checker = ReferenceChecker(
            examples_dir_names={"corpus", "examples"}, known_files=set(_KNOWN)
        )
        doc = _answer("# X\n### 1. One\nSee `examples/snippets/gone.rb`.\n")

        violations = checker.check(answers=[doc])

        assert [v.reason for v in violations] == [REFERENCE_NOT_FOUND]

    def test_empty_name_is_ignored(self) -> None:
        checker = ReferenceChecker(examples_dir_names={""}, known_files=set(_KNOWN))
        doc = _answer("# X\n### 1. One\nSee `examples/snippets/gone.rb`.\n")

        assert checker.check(answers=[doc]) == []


class TestNonReferences:
    """Things that merely look like paths are not checked."""

    def test_urls_ignored(self) -> None:
        doc = _answer("# X\n### 1. One\n[x](https://example.com/examples/nope.rb)\n")

        assert _checker().check(answers=[doc]) == []

    def test_unrelated_code_spans_ignored(self) -> None:
        doc = _answer("# X\n### 1. One\nUse `lib/thing.rb` and `puts`.\n")

        assert _checker().check(answers=[doc]) == []

    def test_bare_directory_name_ignored(self) -> None:
        doc = _answer("# X\n### 1. One\nSee the `examples` folder.\n")

        assert _checker().check(answers=[doc]) == []

    def test_unreadable_answer_skipped(self) -> None:
        doc = make_document(
            "", file="answers/beginner/x.md", role=DocRole.ANSWER, read_error="boom"
        )

        assert _checker().check(answers=[doc]) == []
