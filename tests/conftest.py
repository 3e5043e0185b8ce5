"""Shared fixtures for ghworkflows tests."""

from pathlib import Path

import pytest

from ghworkflows import Push, job, sh, wf


@pytest.fixture
def git_root(tmp_path: Path) -> Path:
    """Temporary directory that looks like a Git checkout."""
    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def two_job_workflow(git_root: Path):
    """Jobs A and B (B needs A), with a source file and target file name."""
    a = job("A", sh("Build", "make"))
    b = job("B", sh("Test", "make test"), needs=[a])
    return wf(
        a,
        b,
        on=[Push()],
        source_file=git_root / "src" / "build.main.kts",
        target_file_name="build.yml",
    )
