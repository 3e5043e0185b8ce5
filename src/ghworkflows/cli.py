# cli.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from ghworkflows.errors import ConfigurationError
from ghworkflows.loader import load_workflow
from ghworkflows.preamble import Preamble, PreambleMode
from ghworkflows.render import to_yaml, write_to_file
from ghworkflows.ui.console import Console, get_console, set_console

PREAMBLE_MODES = {
    "replace": PreambleMode.REPLACE,
    "before": PreambleMode.CUSTOM_BEFORE,
    "after": PreambleMode.CUSTOM_AFTER,
}


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and debug logging)",
)
def cli(debug):
    """ghworkflows: render typed Python workflow definitions to GitHub Actions YAML."""
    console = Console(debug=debug)
    set_console(console)
    if debug:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.argument("script", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--check/--no-check",
    default=None,
    help="Add the YAML consistency check job (defaults to on when the workflow has a source file)",
)
@click.option("--git-root", default=None, type=click.Path(file_okay=False, path_type=Path), help="Repository root")
@click.option("--preamble", "preamble_text", default=None, help="Custom comment text for the top of the file")
@click.option(
    "--preamble-mode",
    type=click.Choice(sorted(PREAMBLE_MODES)),
    default="before",
    show_default=True,
    help="How the custom text combines with the generated comment",
)
@click.option("--write", is_flag=True, default=False, help="Write to .github/workflows/ instead of printing")
def render(script, check, git_root, preamble_text, preamble_mode, write):
    """Render the workflow defined in SCRIPT."""
    console = get_console()

    preamble = None
    if preamble_text is not None:
        preamble = Preamble(preamble_text, PREAMBLE_MODES[preamble_mode])

    try:
        workflow = load_workflow(script)
        console.print_debug(f"Loaded {len(workflow.jobs)} job(s) from {script}")

        if write:
            path = write_to_file(workflow, add_consistency_check=check, git_root=git_root, preamble=preamble)
            console.print_written(path, job_count=len(workflow.jobs))
        else:
            console.print_yaml(
                to_yaml(workflow, add_consistency_check=check, git_root=git_root, preamble=preamble)
            )

    except ConfigurationError as e:
        console.print_error(
            "Cannot render workflow",
            e.message,
            details=[f"{k}={v}" for k, v in e.details.items()] or None,
            suggestion="Set source_file and target_file_name on the workflow, or pass --git-root / --no-check.",
        )
        sys.exit(1)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print_error(
            "Failed to load workflow",
            f"Could not load workflow from {script}",
            details=[str(e)],
        )
        sys.exit(1)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


if __name__ == "__main__":
    cli()
