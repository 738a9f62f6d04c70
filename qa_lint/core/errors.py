"""Base exception class for all qa-lint-specific errors."""


class QaLintError(Exception):
    """Base class for all qa-lint errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UsageError(QaLintError):
    """Raised when the tool is invoked with an unusable argument.

    Usage errors abort the run before any scanning begins.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        super().__init__(f"Failed to start: {argument}: {reason}")
