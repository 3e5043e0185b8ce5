# render.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .assembler import workflow_to_document
from .consistency import inject_consistency_check, source_path_of, workflows_dir
from .emitter import dump
from .errors import ConfigurationError
from .git_facts.git import find_git_root
from .model import Workflow
from .preamble import Preamble, compose_preamble

logger = logging.getLogger(__name__)


def to_yaml(
    workflow: Workflow,
    add_consistency_check: Optional[bool] = None,
    git_root: Optional[Path] = None,
    preamble: Optional[Preamble] = None,
) -> str:
    """
    Render `workflow` to a YAML string. Nothing is written.

    Args:
        workflow: The workflow to render.
        add_consistency_check: Prepend a job that fails the run when the
            checked-in YAML differs from what `workflow.source_file` prints.
            Defaults to True when `source_file` is set.
        git_root: Repository root used to build the relative paths in the
            preamble and the check job. Found from `source_file` when unset.
        preamble: Custom comment text, or None for the generated one.

    Raises:
        ConfigurationError: If the check is requested but cannot be built.
    """
    add_consistency_check, git_root = _defaults(workflow, add_consistency_check, git_root)
    return _generate(workflow, add_consistency_check, False, git_root, preamble)


def write_to_file(
    workflow: Workflow,
    add_consistency_check: Optional[bool] = None,
    git_root: Optional[Path] = None,
    preamble: Optional[Preamble] = None,
) -> Path:
    """
    Render `workflow` and write it to
    `<git_root>/.github/workflows/<workflow.target_file_name>`, replacing any
    existing file. The check job, if any, regenerates the file in place and
    relies on `git diff`.

    Returns:
        The path written.

    Raises:
        ConfigurationError: If the Git root or the target file name is unknown.
        OSError: If the file cannot be written.
    """
    add_consistency_check, git_root = _defaults(workflow, add_consistency_check, git_root)
    if git_root is None:
        raise ConfigurationError(
            kind="missing_git_root",
            message="git_root must be given explicitly when the workflow has no source_file",
        )
    if workflow.target_file_name is None:
        raise ConfigurationError(
            kind="missing_target_file_name",
            message="target_file_name must be set to write the workflow",
        )

    text = _generate(workflow, add_consistency_check, True, git_root, preamble)

    target = workflows_dir(git_root) / workflow.target_file_name
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        f.write(text)
    logger.debug("Wrote %s", target)
    return target


def _defaults(workflow: Workflow, add_consistency_check, git_root):
    if add_consistency_check is None:
        add_consistency_check = workflow.source_file is not None
    if git_root is None and workflow.source_file is not None:
        git_root = find_git_root(workflow.source_file)
        logger.debug("Git root for %s: %s", workflow.source_file, git_root)
    return add_consistency_check, git_root


def _generate(
    workflow: Workflow,
    add_consistency_check: bool,
    use_git_diff: bool,
    git_root: Optional[Path],
    preamble: Optional[Preamble],
) -> str:
    if add_consistency_check:
        jobs = inject_consistency_check(workflow, git_root=git_root, use_git_diff=use_git_diff)
    else:
        jobs = list(workflow.jobs)

    source_path = source_path_of(workflow, git_root)
    document = workflow_to_document(workflow, jobs)
    return compose_preamble(preamble, source_path) + dump(document)
