# consistency.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from .actions import Checkout
from .dsl import job, sh, uses
from .errors import ConfigurationError
from .git_facts.git import relative_posix_path
from .model import Job, RunnerType, Workflow

logger = logging.getLogger(__name__)

CHECK_JOB_ID = "check_yaml_consistency"
CHECK_JOB_NAME = "Check YAML consistency"


def workflows_dir(git_root: Path) -> Path:
    return Path(git_root) / ".github" / "workflows"


def source_path_of(workflow: Workflow, git_root: Optional[Path]) -> Optional[str]:
    """
    Source file relative to the git root for the preamble, or None when either
    is unknown. A source file outside the root gives a `..` path.
    """
    if git_root is None or workflow.source_file is None:
        return None
    source = Path(workflow.source_file).absolute()
    return Path(os.path.relpath(source, Path(git_root).absolute())).as_posix()


def check_commands(target_path: str, source_path: str, use_git_diff: bool) -> List[tuple[str, str]]:
    """
    (step name, shell command) pairs for the check job.

    With `use_git_diff` the checked-in file is deleted, regenerated by running
    the source script, and compared against the last commit. Otherwise the
    script's stdout is diffed against the checked-in file directly.
    Paths are embedded in single quotes as-is.
    """
    if use_git_diff:
        return [
            ("Execute script", f"rm '{target_path}' && '{source_path}'"),
            ("Consistency check", f"git diff --exit-code '{target_path}'"),
        ]
    return [
        ("Consistency check", f"diff -u '{target_path}' <('{source_path}')"),
    ]


def inject_consistency_check(
    workflow: Workflow,
    *,
    git_root: Optional[Path],
    use_git_diff: bool,
) -> List[Job]:
    """
    Return the workflow's jobs with a leading `check_yaml_consistency` job
    that every other job depends on.

    Raises:
        ConfigurationError: If the source file, the Git root or the target
            file name is unknown, or a job already uses the check job's id.
    """
    if workflow.source_file is None:
        raise ConfigurationError(
            kind="missing_source_file",
            message="consistency check requires a valid source_file and Git root directory",
        )
    if git_root is None:
        raise ConfigurationError(
            kind="missing_git_root",
            message="consistency check requires a valid source_file and Git root directory",
            details={"source_file": workflow.source_file},
        )
    if workflow.target_file_name is None:
        raise ConfigurationError(
            kind="missing_target_file_name",
            message="consistency check requires a target_file_name",
        )
    if any(j.id == CHECK_JOB_ID for j in workflow.jobs):
        raise ConfigurationError(
            kind="job_id_conflict",
            message=f"job id '{CHECK_JOB_ID}' is reserved for the consistency check",
        )

    try:
        source_path = relative_posix_path(workflow.source_file, git_root)
    except ValueError as e:
        raise ConfigurationError(
            kind="source_outside_git_root",
            message="source_file must live inside the Git root directory",
            details={"source_file": workflow.source_file, "git_root": git_root},
        ) from e
    target_path = relative_posix_path(workflows_dir(git_root) / workflow.target_file_name, git_root)

    check_job = job(
        CHECK_JOB_ID,
        uses("Check out", Checkout()),
        *(sh(name, cmd) for name, cmd in check_commands(target_path, source_path, use_git_diff)),
        name=CHECK_JOB_NAME,
        runs_on=RunnerType.UBUNTU_LATEST,
        condition=workflow.consistency_check_condition,
    )
    logger.debug(
        "Injecting %s (git_diff=%s) for %s -> %s", CHECK_JOB_ID, use_git_diff, source_path, target_path
    )

    return [check_job, *(j.with_needs(check_job.id) for j in workflow.jobs)]
