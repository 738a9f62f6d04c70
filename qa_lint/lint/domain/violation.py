"""Violation domain value object — one reported convention breach."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Checker(StrEnum):
    IO = "io-error"
    SCHEMA = "schema"
    PAIRING = "pairing"
    EXAMPLES = "examples"
    REFERENCES = "references"


class Severity(StrEnum):
    ERROR = "error"
    INFO = "info"


class Violation(BaseModel, frozen=True):
    """Immutable report of a single breach.

    ``item`` is the numbered item the breach concerns, when there is one.
    ``detail`` carries an optional hint such as the offending token.
    """

    file: str = Field(min_length=1)
    item: int | None = None
    reason: str = Field(min_length=1)
    checker: Checker
    severity: Severity = Severity.ERROR
    detail: str | None = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
