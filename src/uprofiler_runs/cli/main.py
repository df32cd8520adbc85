"""Main CLI entry point for uprofiler-runs.

This module defines the Typer application and all CLI commands.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from uprofiler_runs import __version__
from uprofiler_runs.core.config import Settings
from uprofiler_runs.core.exceptions import InvalidRunKeyError, PayloadEncodingError, RunWriteError
from uprofiler_runs.storage.file_store import FileRunStore

# Create the main Typer app
app = typer.Typer(
    name="uprofiler-runs",
    help="uprofiler-runs: save, fetch and list uprofiler profiling runs.",
    add_completion=False,
    no_args_is_help=True,
)

# Global state for options
state: dict[str, Any] = {
    "json": False,
    "dir": None,
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"uprofiler-runs v{__version__}")
        raise typer.Exit()


def _store() -> FileRunStore:
    return FileRunStore(state["dir"], error_reporter=lambda message: typer.echo(message, err=True))


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results in JSON format.",
        ),
    ] = False,
    directory: Annotated[
        str | None,
        typer.Option(
            "--dir",
            "-d",
            help="Run directory (defaults to UPROFILER_OUTPUT_DIR).",
        ),
    ] = None,
) -> None:
    """uprofiler-runs: save, fetch and list uprofiler profiling runs."""
    state["json"] = json_output
    state["dir"] = directory
    try:
        settings = Settings()
    except ValidationError as e:
        typer.echo(f"Error: Invalid UPROFILER_* settings: {e}", err=True)
        raise typer.Exit(2) from e
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def version() -> None:
    """Show the current version."""
    typer.echo(f"uprofiler-runs v{__version__}")


@app.command("list")
def list_command(
    namespace: Annotated[
        str | None,
        typer.Option(
            "--namespace",
            "-n",
            help="Only list runs in this namespace.",
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            min=0,
            help="Maximum number of runs to list.",
        ),
    ] = None,
) -> None:
    """List stored runs, most recent first.

    Examples:
        uprofiler-runs list
        uprofiler-runs --dir /var/tmp/uprofiler list --namespace myapp
        uprofiler-runs --json list --limit 10
    """
    store = _store()
    records = store.list_runs(namespace=namespace, limit=limit)

    if state["json"]:
        typer.echo(json.dumps([r.to_dict() for r in records], indent=2))
        return

    if not records:
        typer.echo(f"No runs in {store.directory}")
        return

    typer.echo(f"Existing runs in {store.directory}:")
    for record in records:
        modified = record.modified_time.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        typer.echo(f"  {record.run_id}  {record.namespace}  {modified}")


@app.command()
def show(
    run_id: Annotated[str, typer.Argument(help="Run id.")],
    namespace: Annotated[str, typer.Argument(help="Run namespace.")],
) -> None:
    """Print the payload of a stored run as JSON.

    Examples:
        uprofiler-runs show 5f2e1a myapp
    """
    result = _store().get_run(run_id, namespace)

    if not result.found:
        typer.echo(f"Error: {result.description}", err=True)
        raise typer.Exit(1)

    if state["json"]:
        typer.echo(
            json.dumps(
                {
                    "run_id": result.run_id,
                    "namespace": result.namespace,
                    "description": result.description,
                    "payload": result.payload,
                },
                indent=2,
            )
        )
    else:
        typer.echo(result.description)
        typer.echo(json.dumps(result.payload, indent=2))


@app.command()
def save(
    file: Annotated[Path, typer.Argument(help="JSON file holding the profiling data.")],
    namespace: Annotated[str, typer.Argument(help="Namespace to save the run under.")],
    run_id: Annotated[
        str | None,
        typer.Option(
            "--run-id",
            help="Run id to save under (generated if omitted).",
        ),
    ] = None,
) -> None:
    """Save profiling data from a JSON file as a run.

    Examples:
        uprofiler-runs save profile.json myapp
        uprofiler-runs --dir /var/tmp/uprofiler save profile.json myapp --run-id nightly
    """
    try:
        payload = json.loads(file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Error: Could not read {file}: {e}", err=True)
        raise typer.Exit(2) from e

    try:
        saved_id = _store().save_run(payload, namespace, run_id=run_id)
    except InvalidRunKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e
    except (RunWriteError, PayloadEncodingError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if state["json"]:
        typer.echo(json.dumps({"run_id": saved_id, "namespace": namespace}))
    else:
        typer.echo(f"Saved run {saved_id} (Namespace={namespace})")
