"""Command-line interface for critpath."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml

from . import context
from .exceptions import CritPathError
from .loader import load_project
from .logger import setup_logger
from .models import Project
from .scheduler import (
    ScheduleResult,
    SchedulingConfig,
    SchedulingService,
    enumerate_paths,
    path_duration,
)
from .unified_config import UnifiedConfig, discover_config

app = typer.Typer(
    name="critpath",
    help="Critical Path Method scheduling for task dependency graphs",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Output formats for the schedule command."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    CSV = "csv"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity: 0=silent (default), 1=pass summaries, 2=per-task values, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: critpath_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for critpath commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _load(file: Path) -> tuple[Project, SchedulingConfig]:
    """Load config and project, exiting with code 1 on any input error."""
    try:
        unified = discover_config(file) or UnifiedConfig()
        project = load_project(file, config=unified)
    except (CritPathError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return project, unified.scheduler


def _result_to_dict(project: Project, result: ScheduleResult) -> dict[str, Any]:
    """Plain-data form of a result, for JSON and YAML output."""
    names = {task.id: task.name for task in project.tasks}
    return {
        "project_id": result.project_id,
        "project_name": project.name,
        "project_duration": result.project_duration,
        "critical_path": list(result.critical_path),
        "order": list(result.order),
        "tasks": [
            {"name": names[task_id], **asdict(entry)} for task_id, entry in result.entries.items()
        ],
        "warnings": list(result.warnings),
    }


def _format_text(project: Project, result: ScheduleResult) -> str:
    lines = [
        f"Schedule: {project.name} ({project.id})",
        f"Project duration: {result.project_duration}",
        f"Critical path: {' -> '.join(result.critical_path) or '(none)'}",
        "",
        f"{'ID':<12} {'Name':<30} {'Dur':>4} {'ES':>4} {'EF':>4} {'LS':>4} {'LF':>4} {'Slack':>5}",
    ]
    for task in project.tasks:
        entry = result.entries[task.id]
        marker = " *" if entry.is_critical else ""
        lines.append(
            f"{task.id:<12} {task.name[:30]:<30} {entry.duration:>4} "
            f"{entry.earliest_start:>4} {entry.earliest_finish:>4} "
            f"{entry.latest_start:>4} {entry.latest_finish:>4} {entry.slack:>5}{marker}"
        )
    return "\n".join(lines) + "\n"


def _format_csv(project: Project, result: ScheduleResult) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(
        [
            "task_id",
            "task_name",
            "duration",
            "earliest_start",
            "earliest_finish",
            "latest_start",
            "latest_finish",
            "slack",
            "critical",
        ]
    )
    for task in project.tasks:
        entry = result.entries[task.id]
        writer.writerow(
            [
                task.id,
                task.name,
                entry.duration,
                entry.earliest_start,
                entry.earliest_finish,
                entry.latest_start,
                entry.latest_finish,
                entry.slack,
                entry.is_critical,
            ]
        )
    return buffer.getvalue()


def _render(project: Project, result: ScheduleResult, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.JSON:
        return json.dumps(_result_to_dict(project, result), indent=2) + "\n"
    if output_format == OutputFormat.YAML:
        return yaml.safe_dump(_result_to_dict(project, result), sort_keys=False)
    if output_format == OutputFormat.CSV:
        return _format_csv(project, result)
    return _format_text(project, result)


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="Path to the project YAML file")] = Path(
        "project.yaml"
    ),
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Compute earliest/latest times, slack and the critical path."""
    project, config = _load(file)

    try:
        result = SchedulingService(project, config).schedule()
    except CritPathError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    rendered = _render(project, result, output_format)
    if output:
        output.write_text(rendered, encoding="utf-8")
        typer.echo(f"Schedule written to {output}")
    else:
        typer.echo(rendered, nl=False)

    if result.warnings:
        typer.echo("\nWarnings:", err=True)
        for warning in result.warnings:
            typer.echo(f"  - {warning}", err=True)


@app.command()
def paths(
    file: Annotated[Path, typer.Argument(help="Path to the project YAML file")] = Path(
        "project.yaml"
    ),
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Stop after this many paths (overrides config)", min=1),
    ] = None,
) -> None:
    """List every source-to-sink path with its total duration.

    Paths as long as the project duration are marked with '*'.
    """
    project, config = _load(file)
    service = SchedulingService(project, config)
    graph = service.graph()
    result = service.schedule()

    found = enumerate_paths(graph, limit=limit or config.max_paths)
    for path in found:
        total = path_duration(graph, path)
        marker = "*" if total == result.project_duration else " "
        typer.echo(f"{marker} {total:>5}  {' -> '.join(path)}")

    typer.echo(f"\n{len(found)} path(s), project duration {result.project_duration}")


@app.command()
def validate(
    file: Annotated[Path, typer.Argument(help="Path to the project YAML file")] = Path(
        "project.yaml"
    ),
) -> None:
    """Check a project file for structural errors and dependency cycles."""
    project, _ = _load(file)
    typer.echo(f"Project {project.id} is valid ({len(project.tasks)} tasks)")


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
