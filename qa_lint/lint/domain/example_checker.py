"""Example-script checker — the dependency-free / framework-dependent split."""

import re

from qa_lint.config.domain.examples import ExamplesConfig
from qa_lint.corpus.domain.example_script import ExampleScript, ScriptKind
from qa_lint.lint.domain.violation import Checker, Violation

FRAMEWORK_DEPENDENCY_FOUND = "framework dependency found in dependency-free example"
MISSING_SETUP_NOTE = "missing framework version/setup note"
UNCLASSIFIED_EXAMPLE = "example outside dependency-free and framework directories"


class ExampleChecker:
    """Lint-only check of example scripts; never touches the files.

    Denylisted framework tokens are only looked for on code lines (full-line
    comments are skipped), while the version/setup note must appear on a
    comment line.
    """

    def __init__(self, config: ExamplesConfig) -> None:
        self._config = config
        self._denylist = [
            (token, re.compile(rf"(?<![\w.:]){re.escape(token)}(?!\w)"))
            for token in config.framework_denylist
        ]
        self._setup_patterns = [re.compile(p) for p in config.setup_note_patterns]

    def check(self, scripts: list[ExampleScript]) -> list[Violation]:
        violations: list[Violation] = []
        for script in sorted(scripts, key=lambda s: s.file):
            if script.read_error is not None:
                continue
            violation = self._check_script(script=script)
            if violation is not None:
                violations.append(violation)
        return violations

    def _check_script(self, script: ExampleScript) -> Violation | None:
        if script.kind == ScriptKind.DEPENDENCY_FREE:
            return self._check_dependency_free(script=script)
        if script.kind == ScriptKind.FRAMEWORK_DEPENDENT:
            return self._check_framework_dependent(script=script)
        return Violation(
            file=script.file,
            reason=UNCLASSIFIED_EXAMPLE,
            checker=Checker.EXAMPLES,
            detail=(
                f"expected under '{self._config.dependency_free_dir}/'"
                f" or '{self._config.framework_dir}/'"
            ),
        )

    def _check_dependency_free(self, script: ExampleScript) -> Violation | None:
        for number, line in enumerate(script.text.splitlines(), start=1):
            if self._is_comment(line=line):
                continue
            for token, pattern in self._denylist:
                if pattern.search(line):
                    return Violation(
                        file=script.file,
                        reason=FRAMEWORK_DEPENDENCY_FOUND,
                        checker=Checker.EXAMPLES,
                        detail=f"'{token}' on line {number}",
                    )
        return None

    def _check_framework_dependent(self, script: ExampleScript) -> Violation | None:
        comments = [
            line for line in script.text.splitlines() if self._is_comment(line=line)
        ]
        for line in comments:
            if any(pattern.search(line) for pattern in self._setup_patterns):
                return None
        return Violation(
            file=script.file,
            reason=MISSING_SETUP_NOTE,
            checker=Checker.EXAMPLES,
        )

    def _is_comment(self, line: str) -> bool:
        return line.lstrip().startswith(self._config.comment_prefix)
