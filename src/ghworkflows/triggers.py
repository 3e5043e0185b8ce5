# triggers.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from .arguments import args_of, none_if_empty


@dataclass(frozen=True)
class Trigger:
    """An event that starts the workflow (a key under `on:`)."""
    yaml_name: ClassVar[str] = ""

    custom_arguments: Tuple[Tuple[str, Any], ...] = field(default=(), kw_only=True)

    def arguments(self) -> List[Tuple[str, Optional[Any]]]:
        return []

    def to_yaml(self) -> Dict[str, Any]:
        return args_of(self.arguments(), self.custom_arguments)


@dataclass(frozen=True)
class Push(Trigger):
    yaml_name: ClassVar[str] = "push"

    branches: Optional[Sequence[str]] = None
    branches_ignore: Optional[Sequence[str]] = None
    tags: Optional[Sequence[str]] = None
    tags_ignore: Optional[Sequence[str]] = None
    paths: Optional[Sequence[str]] = None
    paths_ignore: Optional[Sequence[str]] = None

    def arguments(self):
        return [
            ("branches", _as_list(self.branches)),
            ("branches-ignore", _as_list(self.branches_ignore)),
            ("tags", _as_list(self.tags)),
            ("tags-ignore", _as_list(self.tags_ignore)),
            ("paths", _as_list(self.paths)),
            ("paths-ignore", _as_list(self.paths_ignore)),
        ]


@dataclass(frozen=True)
class PullRequest(Trigger):
    yaml_name: ClassVar[str] = "pull_request"

    types: Optional[Sequence[str]] = None
    branches: Optional[Sequence[str]] = None
    branches_ignore: Optional[Sequence[str]] = None
    paths: Optional[Sequence[str]] = None
    paths_ignore: Optional[Sequence[str]] = None

    def arguments(self):
        return [
            ("types", _as_list(self.types)),
            ("branches", _as_list(self.branches)),
            ("branches-ignore", _as_list(self.branches_ignore)),
            ("paths", _as_list(self.paths)),
            ("paths-ignore", _as_list(self.paths_ignore)),
        ]


class InputType(str, Enum):
    STRING = "string"
    CHOICE = "choice"
    BOOLEAN = "boolean"
    ENVIRONMENT = "environment"
    NUMBER = "number"


@dataclass(frozen=True)
class DispatchInput:
    description: str
    required: bool = False
    type: InputType = InputType.STRING
    default: Optional[Any] = None
    options: Sequence[str] = ()

    def to_yaml(self) -> Dict[str, Any]:
        return args_of([
            ("description", self.description),
            ("type", self.type.value),
            ("required", self.required),
            ("default", self.default),
            ("options", none_if_empty(list(self.options))),
        ])


@dataclass(frozen=True)
class WorkflowDispatch(Trigger):
    yaml_name: ClassVar[str] = "workflow_dispatch"

    inputs: Dict[str, DispatchInput] = field(default_factory=dict)

    def arguments(self):
        if not self.inputs:
            return []
        return [("inputs", {name: i.to_yaml() for name, i in self.inputs.items()})]


@dataclass(frozen=True)
class Schedule(Trigger):
    """`schedule:` is a list of cron entries rather than a mapping."""
    yaml_name: ClassVar[str] = "schedule"

    crons: Sequence[str] = ()

    def __post_init__(self):
        if not self.crons:
            raise ValueError("Schedule needs at least one cron expression")

    def to_yaml(self) -> List[Dict[str, str]]:
        return [{"cron": c} for c in self.crons]


def triggers_to_yaml(triggers: Sequence[Trigger]) -> Dict[str, Any]:
    return {t.yaml_name: t.to_yaml() for t in triggers}


def _as_list(values: Optional[Sequence[str]]) -> Optional[List[str]]:
    return None if values is None else list(values)
