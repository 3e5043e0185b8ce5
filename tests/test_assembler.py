"""Tests for converting the typed workflow into the ordered document."""

from ghworkflows import (
    Checkout,
    Concurrency,
    CustomAction,
    DispatchInput,
    InputType,
    PullRequest,
    Push,
    RunnerType,
    Schedule,
    Step,
    WorkflowDispatch,
    job,
    sh,
    uses,
    wf,
)
from ghworkflows.assembler import job_to_document, step_to_document, workflow_to_document


def _simple(**kwargs):
    return wf(job("build", sh("Build", "make")), on=[Push()], **kwargs)


def test_minimal_document_keys():
    workflow = _simple()

    doc = workflow_to_document(workflow, workflow.jobs)

    assert list(doc) == ["on", "jobs"]
    assert doc["on"] == {"push": {}}


def test_full_top_level_key_order():
    workflow = _simple(
        name="CI",
        concurrency=Concurrency(group="ci-${{ github.ref }}", cancel_in_progress=True),
        env={"FOO": "bar"},
        custom_arguments=[("permissions", {"contents": "read"}), ("run-name", "Deploy")],
    )

    doc = workflow_to_document(workflow, workflow.jobs)

    assert list(doc) == ["name", "on", "concurrency", "env", "permissions", "run-name", "jobs"]
    assert doc["concurrency"] == {"group": "ci-${{ github.ref }}", "cancel-in-progress": True}
    assert doc["env"] == {"FOO": "bar"}


def test_concurrency_always_emits_cancel_flag():
    doc = workflow_to_document(_simple(concurrency=Concurrency("g")), _simple().jobs)

    assert doc["concurrency"] == {"group": "g", "cancel-in-progress": False}


def test_uses_the_given_job_list():
    workflow = _simple()
    extra = job("extra", sh("x", "true"))

    doc = workflow_to_document(workflow, [extra, *workflow.jobs])

    assert list(doc["jobs"]) == ["extra", "build"]


def test_triggers():
    workflow = wf(
        job("build", sh("Build", "make")),
        on=[
            Push(branches=["main"], tags_ignore=["v*"]),
            PullRequest(types=["opened"]),
            WorkflowDispatch(inputs={"level": DispatchInput("Log level", type=InputType.CHOICE, options=["info", "debug"])}),
            Schedule(crons=["0 0 * * *"]),
        ],
    )

    doc = workflow_to_document(workflow, workflow.jobs)

    assert doc["on"] == {
        "push": {"branches": ["main"], "tags-ignore": ["v*"]},
        "pull_request": {"types": ["opened"]},
        "workflow_dispatch": {
            "inputs": {
                "level": {"description": "Log level", "type": "choice", "required": False, "options": ["info", "debug"]},
            },
        },
        "schedule": [{"cron": "0 0 * * *"}],
    }


def test_job_document_order_and_omissions():
    j = job(
        "test",
        sh("Test", "pytest"),
        name="Tests",
        runs_on=RunnerType.WINDOWS_LATEST,
        needs=["build"],
        condition="${{ always() }}",
        env={"CI": "1"},
        timeout_minutes=30,
        custom_arguments=[("permissions", "read-all")],
    )

    doc = job_to_document(j)

    assert list(doc) == ["name", "runs-on", "if", "needs", "env", "timeout-minutes", "permissions", "steps"]
    assert doc["runs-on"] == RunnerType.WINDOWS_LATEST
    assert doc["needs"] == ["build"]


def test_job_without_needs_omits_key():
    doc = job_to_document(job("a", sh("s", "true")))

    assert list(doc) == ["runs-on", "steps"]


def test_runner_labels_list():
    workflow = wf(job("a", sh("s", "true"), runs_on=["self-hosted", "linux"]), on=[Push()])

    doc = workflow_to_document(workflow, workflow.jobs)

    assert doc["jobs"]["a"]["runs-on"] == ["self-hosted", "linux"]


def test_command_step():
    step = Step(name="Run", run="echo hi", id="hello", shell="bash", working_directory="app", env={"A": "1"})

    assert step_to_document(step) == {
        "id": "hello",
        "name": "Run",
        "run": "echo hi",
        "shell": "bash",
        "working-directory": "app",
        "env": {"A": "1"},
    }


def test_action_step_with_inputs():
    step = uses("Check out", Checkout(fetch_depth=0, _custom_inputs=(("sparse-checkout", "src"),)), id="co")

    assert step_to_document(step) == {
        "id": "co",
        "name": "Check out",
        "uses": "actions/checkout@v3",
        "with": {"fetch-depth": "0", "sparse-checkout": "src"},
    }


def test_action_step_without_inputs_omits_with():
    doc = step_to_document(uses("Check out", Checkout(_custom_version="v4")))

    assert doc == {"name": "Check out", "uses": "actions/checkout@v4"}


def test_custom_action():
    action = CustomAction("actions", "setup-python", "v4", custom_inputs={"python-version": "3.12"})

    doc = step_to_document(uses("Python", action, condition="${{ success() }}"))

    assert doc == {
        "name": "Python",
        "uses": "actions/setup-python@v4",
        "with": {"python-version": "3.12"},
        "if": "${{ success() }}",
    }


def test_steps_are_numbered_in_jobs():
    j = job("a", sh("one", "true"), sh("two", "true", id="named"), sh("three", "true"))

    assert [s["id"] for s in job_to_document(j)["steps"]] == ["step-0", "named", "step-2"]
