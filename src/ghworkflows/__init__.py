from .actions import Action, Checkout, CustomAction
from .dsl import job, sh, uses, wf, JobBuilder, build
from .errors import ConfigurationError
from .model import Concurrency, Job, RunnerType, Step, Workflow
from .preamble import Preamble, PreambleMode
from .render import to_yaml, write_to_file
from .triggers import DispatchInput, InputType, PullRequest, Push, Schedule, WorkflowDispatch

__all__ = [
    "Action", "Checkout", "CustomAction",
    "job", "sh", "uses", "wf", "JobBuilder", "build",
    "ConfigurationError",
    "Concurrency", "Job", "RunnerType", "Step", "Workflow",
    "Preamble", "PreambleMode",
    "to_yaml", "write_to_file",
    "DispatchInput", "InputType", "PullRequest", "Push", "Schedule", "WorkflowDispatch",
]
