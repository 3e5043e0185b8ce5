# loader.py
from __future__ import annotations

import runpy
from pathlib import Path

from .model import Workflow


def load_workflow(path: str | Path) -> Workflow:
    """
    Load a workflow from a python file path.

    The file must define either:
      - workflow() -> Workflow
      - WORKFLOW = Workflow(...)

    The file is run with a module name other than "__main__", so a
    `if __name__ == "__main__":` block that writes the YAML is skipped.
    """
    wf_path = Path(path).expanduser().resolve()
    if not wf_path.exists():
        raise FileNotFoundError(f"Workflow file not found: {wf_path}")
    if wf_path.suffix != ".py":
        raise ValueError(f"Workflow must be a .py file, got: {wf_path.name}")

    module_name = f"ghworkflows_script_{wf_path.stem.replace('.', '_')}"
    globals_dict = runpy.run_path(str(wf_path), run_name=module_name)

    loaded = None
    if "workflow" in globals_dict and callable(globals_dict["workflow"]):
        loaded = globals_dict["workflow"]()
    elif "WORKFLOW" in globals_dict:
        loaded = globals_dict["WORKFLOW"]

    if not isinstance(loaded, Workflow):
        raise TypeError(
            "Workflow script must return/define a Workflow. "
            "Define workflow() -> Workflow or WORKFLOW = Workflow(...)."
        )

    return loaded
