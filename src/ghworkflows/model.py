# model.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .actions import Action
from .dag import validate_job_graph
from .triggers import Trigger


class RunnerType(str, Enum):
    """GitHub-hosted runner labels."""
    UBUNTU_LATEST = "ubuntu-latest"
    WINDOWS_LATEST = "windows-latest"
    MACOS_LATEST = "macos-latest"


RunsOn = Union[RunnerType, str, Sequence[str]]


@dataclass(frozen=True)
class Step:
    """
    A single step inside a job: either runs a shell command (`run`) or
    invokes an action (`action`), never both.
    """
    name: Optional[str] = None
    run: Optional[str] = None
    action: Optional[Action] = None
    id: Optional[str] = None
    condition: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)
    continue_on_error: Optional[bool] = None
    timeout_minutes: Optional[int] = None

    # command steps only
    shell: Optional[str] = None
    working_directory: Optional[str] = None

    custom_arguments: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self):
        if (self.run is None) == (self.action is None):
            raise ValueError(f"Step {self.name!r} must define exactly one of run= or action=")
        if self.action is not None and (self.shell or self.working_directory):
            raise ValueError(f"Step {self.name!r}: shell/working_directory only apply to run steps")

    @property
    def is_command(self) -> bool:
        return self.run is not None


@dataclass(frozen=True)
class Job:
    """
    A CI job: runner + ordered steps + dependencies.

    Jobs are values. Adding a dependency goes through `with_needs`, which
    returns a new Job.
    """
    id: str
    runs_on: RunsOn
    steps: Tuple[Step, ...]
    name: Optional[str] = None

    # ids of jobs that must finish before this one, first occurrence wins
    needs: Tuple[str, ...] = ()

    condition: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)
    timeout_minutes: Optional[int] = None
    custom_arguments: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self):
        if not self.id:
            raise ValueError("Job id must not be empty")
        if not self.steps:
            raise ValueError(f"Job '{self.id}' has no steps")
        if isinstance(self.needs, str):
            raise ValueError(f"Job '{self.id}': needs must be a sequence of job ids, not a string")
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "needs", _dedupe(self.needs))

    def with_needs(self, *job_ids: str) -> Job:
        """Copy of this job depending on `job_ids` first, then on its existing needs."""
        return replace(self, needs=_dedupe((*job_ids, *self.needs)))


@dataclass(frozen=True)
class Concurrency:
    group: str
    cancel_in_progress: bool = False


@dataclass(frozen=True)
class Workflow:
    """
    A whole workflow file.

    `source_file` is the script that builds this workflow and
    `target_file_name` the YAML file name under .github/workflows/. Both are
    needed for the consistency check.
    """
    on: Tuple[Trigger, ...]
    jobs: Tuple[Job, ...]
    name: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)
    concurrency: Optional[Concurrency] = None
    source_file: Optional[Path] = None
    target_file_name: Optional[str] = None
    consistency_check_condition: Optional[str] = None
    custom_arguments: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "on", tuple(self.on))
        object.__setattr__(self, "jobs", tuple(self.jobs))
        object.__setattr__(self, "custom_arguments", tuple(self.custom_arguments))
        if self.source_file is not None:
            object.__setattr__(self, "source_file", Path(self.source_file))
        if not self.on:
            raise ValueError("Workflow needs at least one trigger")

        validate_job_graph(self.jobs)


def _dedupe(ids) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(ids))
