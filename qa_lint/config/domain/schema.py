"""Document schema configuration model."""

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_ITEM_PATTERN = r"^###\s+[Qq]?(\d+)\."


class SchemaConfig(BaseModel, frozen=True, extra="forbid"):
    """Shape rules shared by question and answer documents.

    ``item_pattern`` matches a numbered item marker line; its first capture
    group must be the item number.
    """

    item_pattern: str = Field(default=DEFAULT_ITEM_PATTERN, min_length=1)

    @field_validator("item_pattern")
    @classmethod
    def _compiles_with_number_group(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression: {exc}") from exc
        if compiled.groups < 1:
            raise ValueError("pattern must capture the item number in a group")
        return value
