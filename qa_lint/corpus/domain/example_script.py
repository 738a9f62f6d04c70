"""Example-script value object."""

from enum import StrEnum

from pydantic import BaseModel


class ScriptKind(StrEnum):
    DEPENDENCY_FREE = "dependency-free"
    FRAMEWORK_DEPENDENT = "framework-dependent"
    UNCLASSIFIED = "unclassified"


class ExampleScript(BaseModel, frozen=True):
    file: str
    relative_path: str
    kind: ScriptKind
    text: str = ""
    self_executable: bool = False
    read_error: str | None = None
