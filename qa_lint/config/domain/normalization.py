"""Topic-key normalization configuration model."""

from pydantic import BaseModel, Field, field_validator


class NormalizationConfig(BaseModel, frozen=True, extra="forbid"):
    """How a file stem becomes a topic key for pairing.

    With the defaults ``Blocks_Procs_Lambdas``, ``blocks-procs-lambdas`` and
    ``blocks procs lambdas`` all normalize to ``blocks_procs_lambdas``.
    Set ``separators`` to ``[]`` to keep hyphenated and underscored stems
    distinct.
    """

    lowercase: bool = True
    collapse_whitespace: bool = True
    separators: list[str] = Field(default_factory=lambda: ["-"])

    @field_validator("separators")
    @classmethod
    def _single_characters(cls, value: list[str]) -> list[str]:
        bad = [sep for sep in value if len(sep) != 1]
        if bad:
            raise ValueError(f"separators must be single characters, got {bad!r}")
        return value
