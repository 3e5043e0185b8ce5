"""Tests for the workflow model, DSL helpers and job graph validation."""

import dataclasses

import pytest

from ghworkflows import Checkout, Job, JobBuilder, Push, Schedule, Step, build, job, sh, uses, wf
from ghworkflows.dag import validate_job_graph


def test_step_needs_exactly_one_of_run_or_action():
    with pytest.raises(ValueError):
        Step(name="nothing")
    with pytest.raises(ValueError):
        Step(name="both", run="true", action=Checkout())


def test_shell_only_for_run_steps():
    with pytest.raises(ValueError):
        Step(name="x", action=Checkout(), shell="bash")


def test_job_requires_steps():
    with pytest.raises(ValueError):
        job("empty")


def test_jobs_are_frozen():
    j = job("a", sh("s", "true"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        j.needs = ("b",)


def test_with_needs_returns_new_job_and_merges():
    original = job("c", sh("s", "true"), needs=["a", "b"])

    updated = original.with_needs("check", "a")

    assert updated is not original
    assert original.needs == ("a", "b")
    assert updated.needs == ("check", "a", "b")
    assert updated.steps == original.steps


def test_needs_accepts_jobs_and_dedupes():
    a = job("a", sh("s", "true"))

    assert job("b", sh("s", "true"), needs=[a, "a"]).needs == ("a",)


def test_workflow_rejects_duplicate_job_ids():
    with pytest.raises(ValueError, match="Duplicate job ids"):
        wf(job("a", sh("s", "true")), job("a", sh("s", "true")), on=[Push()])


def test_workflow_rejects_unknown_needs():
    with pytest.raises(ValueError, match="missing job 'ghost'"):
        wf(job("a", sh("s", "true"), needs=["ghost"]), on=[Push()])


def test_workflow_rejects_cycles():
    with pytest.raises(ValueError, match="cycle"):
        wf(
            job("a", sh("s", "true"), needs=["b"]),
            job("b", sh("s", "true"), needs=["a"]),
            on=[Push()],
        )


def test_workflow_requires_a_trigger():
    with pytest.raises(ValueError):
        wf(job("a", sh("s", "true")), on=[])


def test_schedule_requires_crons():
    with pytest.raises(ValueError):
        Schedule()


def test_validate_job_graph_accepts_diamond():
    jobs = [
        job("lint", sh("s", "true")),
        job("test", sh("s", "true"), needs=["lint"]),
        job("docs", sh("s", "true"), needs=["lint"]),
        job("deploy", sh("s", "true"), needs=["test", "docs"]),
    ]

    assert validate_job_graph(jobs) is None


def test_cycle_message_names_the_cycle():
    jobs = [
        job("a", sh("s", "true"), needs=["b"]),
        job("b", sh("s", "true"), needs=["c"]),
        job("c", sh("s", "true"), needs=["a"]),
    ]

    with pytest.raises(ValueError, match="a -> b -> c -> a"):
        validate_job_graph(jobs)


def test_self_dependency_is_a_cycle():
    with pytest.raises(ValueError, match="a -> a"):
        validate_job_graph([job("a", sh("s", "true"), needs=["a"])])


def test_needs_as_bare_string_is_rejected():
    with pytest.raises(ValueError, match="needs must be"):
        job("b", sh("s", "true"), needs="AB")
    with pytest.raises(ValueError, match="needs must be"):
        Job(id="b", runs_on="ubuntu-latest", steps=(sh("s", "true"),), needs="AB")


def test_job_builder():
    j = (
        build("test")
        .named("Tests")
        .depends_on("lint")
        .uses("Check out", Checkout())
        .run("Run tests", "pytest", shell="bash")
        .when("${{ github.event_name == 'push' }}")
        .with_env(PYTHONHASHSEED=0)
        .timeout(20)
        .with_argument("permissions", "read-all")
        .build()
    )

    assert j.name == "Tests"
    assert j.needs == ("lint",)
    assert [s.id for s in j.steps] == ["step-0", "step-1"]
    assert j.steps[1].shell == "bash"
    assert j.env == {"PYTHONHASHSEED": "0"}
    assert j.timeout_minutes == 20
    assert j.custom_arguments == (("permissions", "read-all"),)


def test_job_builder_requires_steps():
    with pytest.raises(ValueError):
        JobBuilder("empty").build()


def test_uses_helper():
    step = uses("Check out", Checkout(ref="main"))

    assert step.action.to_yaml_arguments() == {"ref": "main"}
    assert not step.is_command
