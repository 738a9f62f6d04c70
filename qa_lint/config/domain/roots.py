"""Corpus root directories."""

from pathlib import Path

from pydantic import BaseModel


class RootsConfig(BaseModel, frozen=True, extra="forbid"):
    questions: Path = Path("questions")
    answers: Path = Path("answers")
    examples: Path = Path("examples")
