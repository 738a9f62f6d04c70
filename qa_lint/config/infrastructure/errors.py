"""Error types raised by config infrastructure."""

from pathlib import Path

from qa_lint.core.errors import QaLintError


class ConfigValidationError(QaLintError):
    """Raised when the loaded config is not valid YAML or fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(QaLintError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config: {reason}: {path}")
