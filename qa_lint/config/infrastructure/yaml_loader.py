"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from qa_lint.config.domain.config import LintConfig
from qa_lint.config.domain.observer import ConfigObserver
from qa_lint.config.infrastructure.errors import ConfigLoadError, ConfigValidationError

DEFAULT_CONFIG_FILENAME = "qa-lint.yaml"


class YamlConfigLoader:
    """Loads and validates a LintConfig from a YAML file, or falls back to defaults."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None = None) -> LintConfig:
        """
        Return the LintConfig for this run.

        With an explicit path the file must exist. Without one, a
        ``qa-lint.yaml`` in the working directory is used when present,
        otherwise the built-in defaults.

        Relative root paths in the file are taken relative to the working
        directory, the same as paths given on the command line.

        Raises:
            ConfigLoadError: if an explicit path does not exist or cannot be read.
            ConfigValidationError: if the file is not valid YAML, is not a
                mapping, or violates the config schema.
        """
        if path is None:
            candidate = Path(DEFAULT_CONFIG_FILENAME)
            if not candidate.is_file():
                self._observer.config_defaulted()
                return LintConfig()
            path = candidate

        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(path=str(path), levels=list(cfg.levels))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except IsADirectoryError as exc:
        raise ConfigLoadError(path=path, reason="is a directory") from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigValidationError(
            f"{path} is not valid UTF-8: {exc.reason} at byte {exc.start}"
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML in {path}: {exc}") from exc


def _build_config(raw: Any) -> LintConfig:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"top level must be a mapping, got {type(raw).__name__}"
        )
    try:
        return LintConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
