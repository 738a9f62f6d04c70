"""Execution configuration model."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True, extra="forbid"):
    max_concurrent: int = Field(default=8, ge=1)
