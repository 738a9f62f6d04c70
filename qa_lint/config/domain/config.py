"""Top-level LintConfig aggregate — the root configuration object."""

from typing import TypeAlias

from pydantic import BaseModel, Field

from qa_lint.config.domain.examples import ExamplesConfig
from qa_lint.config.domain.execution import ExecutionConfig
from qa_lint.config.domain.normalization import NormalizationConfig
from qa_lint.config.domain.roots import RootsConfig
from qa_lint.config.domain.schema import SchemaConfig

LevelName: TypeAlias = str

DEFAULT_LEVELS: list[LevelName] = ["beginner", "intermediate", "advanced", "rails"]


class LintConfig(
    BaseModel, frozen=True, extra="forbid", populate_by_name=True
):
    """Root configuration aggregate for a qa-lint run.

    Every section has a default, so an empty YAML document is a valid config.
    """

    roots: RootsConfig = Field(default_factory=RootsConfig)
    levels: list[LevelName] = Field(
        default_factory=lambda: list(DEFAULT_LEVELS), min_length=1
    )
    schema_rules: SchemaConfig = Field(default_factory=SchemaConfig, alias="schema")
    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    examples: ExamplesConfig = Field(default_factory=ExamplesConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
