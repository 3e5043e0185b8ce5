# assembler.py
# Typed workflow -> ordered document (plain dicts/lists/scalars).
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Sequence

from .arguments import args_of, none_if_empty
from .model import Job, Step, Workflow
from .triggers import triggers_to_yaml


def workflow_to_document(workflow: Workflow, jobs: Sequence[Job]) -> Dict[str, Any]:
    """
    Build the top-level document. `jobs` is the job list to emit, which may
    differ from `workflow.jobs` when a consistency check was injected.
    """
    concurrency = None
    if workflow.concurrency is not None:
        concurrency = {
            "group": workflow.concurrency.group,
            "cancel-in-progress": workflow.concurrency.cancel_in_progress,
        }

    return _plain(args_of(
        [
            ("name", workflow.name),
            ("on", triggers_to_yaml(workflow.on)),
            ("concurrency", concurrency),
            ("env", none_if_empty(dict(workflow.env))),
        ],
        [*workflow.custom_arguments, ("jobs", jobs_to_document(jobs))],
    ))


def jobs_to_document(jobs: Sequence[Job]) -> Dict[str, Any]:
    return {j.id: job_to_document(j) for j in jobs}


def job_to_document(job: Job) -> Dict[str, Any]:
    return args_of(
        [
            ("name", job.name),
            ("runs-on", job.runs_on),
            ("if", job.condition),
            ("needs", none_if_empty(list(job.needs))),
            ("env", none_if_empty(dict(job.env))),
            ("timeout-minutes", job.timeout_minutes),
        ],
        [*job.custom_arguments, ("steps", [step_to_document(s) for s in job.steps])],
    )


def step_to_document(step: Step) -> Dict[str, Any]:
    if step.is_command:
        body = [
            ("run", step.run),
            ("shell", step.shell),
            ("working-directory", step.working_directory),
        ]
    else:
        body = [
            ("uses", step.action.action_string),
            ("with", none_if_empty(step.action.to_yaml_arguments())),
        ]

    return args_of(
        [
            ("id", step.id),
            ("name", step.name),
            *body,
            ("if", step.condition),
            ("env", none_if_empty(dict(step.env))),
            ("continue-on-error", step.continue_on_error),
            ("timeout-minutes", step.timeout_minutes),
        ],
        step.custom_arguments,
    )


def _plain(value: Any) -> Any:
    """Tuples to lists and enums to their values, recursively."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value