#!/usr/bin/env python3
# .github/workflows/ci.main.py
# Workflow for ghworkflows itself: lint and test, rendered to .github/workflows/ci.yaml
from __future__ import annotations

from pathlib import Path

from ghworkflows import Checkout, Concurrency, CustomAction, PullRequest, Push, job, sh, uses, wf, write_to_file


def setup_python(version: str):
    return uses(
        "Set up Python",
        CustomAction("actions", "setup-python", "v4", custom_inputs={"python-version": version}),
    )


def workflow():
    lint = job(
        "lint",
        uses("Check out", Checkout()),
        setup_python("3.12"),
        sh("Install ruff", "pip install ruff"),
        sh("Ruff check", "ruff check ."),
        name="Lint",
    )

    return wf(
        lint,
        # Test job - runs pytest on the codebase
        job(
            "test",
            uses("Check out", Checkout()),
            setup_python("3.12"),
            sh("Install package", "pip install -e .[test]"),
            sh("Run pytest", "pytest -q"),
            name="Test",
            needs=[lint],
        ),
        name="CI",
        on=[Push(branches=["main"]), PullRequest()],
        concurrency=Concurrency(group="ci-${{ github.ref }}", cancel_in_progress=True),
        source_file=Path(__file__),
        target_file_name="ci.yaml",
    )


if __name__ == "__main__":
    write_to_file(workflow())
