# src/ghworkflows/dsl.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .actions import Action
from .model import Concurrency, Job, RunnerType, RunsOn, Step, Workflow
from .triggers import Trigger


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def sh(
    name: str,
    cmd: str,
    *,
    id: str | None = None,
    condition: str | None = None,
    env: Optional[Dict[str, str]] = None,
    shell: str | None = None,
    working_directory: str | None = None,
) -> Step:
    """Create a shell step."""
    return Step(
        name=name,
        run=cmd,
        id=id,
        condition=condition,
        env=env or {},
        shell=shell,
        working_directory=working_directory,
    )


def uses(
    name: str,
    action: Action,
    *,
    id: str | None = None,
    condition: str | None = None,
    env: Optional[Dict[str, str]] = None,
) -> Step:
    """Create a step that invokes an action."""
    return Step(name=name, action=action, id=id, condition=condition, env=env or {})


# ---------------------------------------------------------------------
# Functional Job helper
# ---------------------------------------------------------------------

JobRef = Union[Job, str]


def job(
    id: str,
    *steps: Step,  # allow: job("x", sh(...), sh(...))
    runs_on: RunsOn = RunnerType.UBUNTU_LATEST,
    name: str | None = None,
    needs: Optional[Sequence[JobRef]] = None,  # Job objects or ids
    condition: str | None = None,
    env: Optional[Dict[str, str]] = None,
    timeout_minutes: int | None = None,
    custom_arguments: Sequence[Tuple[str, Any]] = (),
) -> Job:
    if not steps:
        raise ValueError(f"job({id!r}) must have at least one step")
    if isinstance(needs, (str, Job)):
        raise ValueError(f"job({id!r}): needs must be a list of jobs or job ids")

    return Job(
        id=id,
        name=name,
        runs_on=runs_on,
        steps=_number_steps(steps),
        needs=tuple(_job_id(n) for n in (needs or [])),
        condition=condition,
        env=env or {},
        timeout_minutes=timeout_minutes,
        custom_arguments=tuple(custom_arguments),
    )


def _number_steps(steps: Sequence[Step]) -> Tuple[Step, ...]:
    # steps without an explicit id get "step-<index>"
    return tuple(s if s.id is not None else replace(s, id=f"step-{i}") for i, s in enumerate(steps))


def _job_id(ref: JobRef) -> str:
    return ref.id if isinstance(ref, Job) else ref


# ---------------------------------------------------------------------
# Builder API
# ---------------------------------------------------------------------

class JobBuilder:
    def __init__(self, id: str, runs_on: RunsOn = RunnerType.UBUNTU_LATEST):
        self.id = id
        self._runs_on = runs_on
        self._name: str | None = None
        self._needs: list[str] = []
        self._steps: list[Step] = []
        self._condition: str | None = None
        self._env: dict[str, str] = {}
        self._timeout_minutes: int | None = None
        self._custom_arguments: list[tuple[str, Any]] = []

    def named(self, name: str):
        self._name = name
        return self

    def depends_on(self, *jobs: JobRef):
        self._needs.extend(_job_id(j) for j in jobs)
        return self

    def run(self, name: str, cmd: str, **kwargs):
        self._steps.append(sh(name, cmd, **kwargs))
        return self

    def uses(self, name: str, action: Action, **kwargs):
        self._steps.append(uses(name, action, **kwargs))
        return self

    def when(self, condition: str):
        self._condition = condition
        return self

    def with_env(self, **env):
        # force values to str, env values are strings in YAML
        self._env.update({k: str(v) for k, v in env.items()})
        return self

    def timeout(self, minutes: int):
        self._timeout_minutes = minutes
        return self

    def with_argument(self, key: str, value: Any):
        self._custom_arguments.append((key, value))
        return self

    def build(self) -> Job:
        if not self._steps:
            raise ValueError(f"Job '{self.id}' has no steps")

        return job(
            self.id,
            *self._steps,
            runs_on=self._runs_on,
            name=self._name,
            needs=self._needs,
            condition=self._condition,
            env=self._env,
            timeout_minutes=self._timeout_minutes,
            custom_arguments=self._custom_arguments,
        )


def build(id: str, runs_on: RunsOn = RunnerType.UBUNTU_LATEST) -> JobBuilder:
    """Convenience: build('test').run(...).build()"""
    return JobBuilder(id, runs_on)


# ---------------------------------------------------------------------
# Workflow helper (single-file story)
# ---------------------------------------------------------------------

def wf(
    *jobs: Job,
    on: Sequence[Trigger],
    name: str | None = None,
    env: Optional[Dict[str, str]] = None,
    concurrency: Concurrency | None = None,
    source_file: str | Path | None = None,
    target_file_name: str | None = None,
    consistency_check_condition: str | None = None,
    custom_arguments: Sequence[Tuple[str, Any]] = (),
) -> Workflow:
    """
    Workflow definition helper.

    Users can write:
        from ghworkflows import wf, job, sh, Push

        WORKFLOW = wf(
            job("test", sh("Run tests", "pytest")),
            on=[Push(branches=["main"])],
            source_file=__file__,
            target_file_name="test.yaml",
        )
    """
    return Workflow(
        on=tuple(on),
        jobs=jobs,
        name=name,
        env=env or {},
        concurrency=concurrency,
        source_file=Path(source_file) if source_file is not None else None,
        target_file_name=target_file_name,
        consistency_check_condition=consistency_check_condition,
        custom_arguments=tuple(custom_arguments),
    )
