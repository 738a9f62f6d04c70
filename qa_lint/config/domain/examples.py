"""Example-script convention configuration model."""

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_FRAMEWORK_DENYLIST: list[str] = [
    "ApplicationRecord",
    "ActiveRecord",
    "ActiveModel",
    "ActiveSupport",
    "ActiveJob",
    "ApplicationJob",
    "ActionController",
    "ApplicationController",
    "ActionView",
    "ActionMailer",
    "Rails.application",
    "Rails.env",
    "routes.draw",
    "has_many",
    "has_one",
    "belongs_to",
    "before_save",
    "after_save",
    "before_create",
    "after_create",
    "after_commit",
    "before_action",
]

DEFAULT_SETUP_NOTE_PATTERNS: list[str] = [
    r"(?i)\bsetup\b",
    r"\b\d+\.\d+(?:\.\d+)?\b",
]

DEFAULT_SELF_EXECUTABLE_PATTERN = (
    r"^\s*if\s+(?:__FILE__\s*==\s*\$(?:0|PROGRAM_NAME)"
    r"|\$(?:0|PROGRAM_NAME)\s*==\s*__FILE__)"
)


class ExamplesConfig(BaseModel, frozen=True, extra="forbid"):
    """Rules for the dependency-free / framework-dependent script split."""

    suffixes: list[str] = Field(default_factory=lambda: [".rb"], min_length=1)
    dependency_free_dir: str = Field(default="snippets", min_length=1)
    framework_dir: str = Field(default="rails", min_length=1)
    comment_prefix: str = Field(default="#", min_length=1)
    framework_denylist: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FRAMEWORK_DENYLIST)
    )
    setup_note_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SETUP_NOTE_PATTERNS), min_length=1
    )
    self_executable_pattern: str = DEFAULT_SELF_EXECUTABLE_PATTERN

    @field_validator("setup_note_patterns")
    @classmethod
    def _patterns_compile(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc
        return value

    @field_validator("self_executable_pattern")
    @classmethod
    def _pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid pattern {value!r}: {exc}") from exc
        return value
