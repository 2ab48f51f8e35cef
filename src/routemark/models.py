from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RouteDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    verb: str
    path: str
    name: str | None = None
    defaults: dict[str, Any] = Field(default_factory=dict)

    @field_validator("verb", "path")
    @classmethod
    def _single_token(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("must be a non-empty string without whitespace")
        return value

    @field_validator("name")
    @classmethod
    def _single_line_name(cls, value: str | None) -> str | None:
        if value is not None and ("\n" in value or "\r" in value):
            raise ValueError("name must fit on one line")
        return value

    @field_validator("defaults")
    @classmethod
    def _single_line_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        if any("\n" in key or "\r" in key for key in value):
            raise ValueError("default keys must fit on one line")
        return value


# controller -> action -> descriptors
RouteTable = dict[str, dict[str, list[RouteDescriptor]]]


class AnnotateOptions(BaseModel):
    """Flags and paths for one annotate run."""

    dry_run: bool = False
    error_on_annotation: bool = False
    verbose: bool = False
    controllers_pattern: str
    exclusion_pattern: str
    routes_file: Path


class GroupKind(str, Enum):
    COMMENT = "comment"
    ACTION = "action"
    OTHER = "other"


@dataclass
class Group:
    kind: GroupKind
    body: str
    identity: str | None = None


@dataclass
class ParsedFile:
    path: Path
    language: str
    content: str
    groups: list[Group]

    def render(self) -> str:
        return "".join(group.body for group in self.groups)


@dataclass
class RunResult:
    dry_run: bool = False
    changed_files: list[Path] = field(default_factory=list)
    failed_files: list[tuple[Path, str]] = field(default_factory=list)
