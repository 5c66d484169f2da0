"""Schedule computation entry points."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from critpath.logger import get_logger

from .config import DanglingDependencyPolicy, SchedulingConfig
from .core import ScheduleResult, TaskGraph
from .ordering import topological_order
from .passes import backward_pass, forward_pass, project_duration
from .slack import check_invariants, critical_path, derive_entries

if TYPE_CHECKING:
    from critpath.models import Project, Task

logger = get_logger()


def dangling_warnings(graph: TaskGraph) -> list[str]:
    """One message per dependency ID that names no task."""
    return [
        f"Task {task_id} depends on unknown task {dep_id} (ignored)"
        for task_id, missing in graph.dangling.items()
        for dep_id in missing
    ]


def compute_schedule(
    tasks: Iterable[Task],
    project_id: str | None = None,
    config: SchedulingConfig | None = None,
) -> ScheduleResult:
    """Run the full CPM pipeline over a task collection.

    Args:
        tasks: Tasks in any order
        project_id: Opaque tag copied into the result
        config: Optional scheduling configuration

    Returns:
        ScheduleResult with per-task entries, critical path and duration

    Raises:
        CycleDetectedError: If the dependency graph is cyclic
        DuplicateTaskError: If two tasks share an ID
        InvalidDurationError: If a duration is negative or not an integer
    """
    config = config or SchedulingConfig()
    graph = TaskGraph.build(tasks)

    warnings: list[str] = []
    if graph.dangling and config.dangling_dependencies != DanglingDependencyPolicy.IGNORE:
        warnings = dangling_warnings(graph)
        for warning in warnings:
            logger.warning(warning)

    order = topological_order(graph)
    earliest = forward_pass(graph, order)
    duration = project_duration(earliest)
    latest = backward_pass(graph, order, duration)
    entries = derive_entries(graph, order, earliest, latest)

    if config.check_invariants:
        check_invariants(entries, duration)

    path = critical_path(order, entries)
    logger.summary(f"Critical path: {' -> '.join(path) if path else '(empty)'}")

    return ScheduleResult(
        project_id=project_id,
        project_duration=duration,
        critical_path=path,
        entries=entries,
        order=order,
        warnings=warnings,
    )


class SchedulingService:
    """Schedules a loaded Project."""

    def __init__(self, project: Project, config: SchedulingConfig | None = None):
        self.project = project
        self.config = config or SchedulingConfig()

    def graph(self) -> TaskGraph:
        """Lookup tables for the project's tasks."""
        return TaskGraph.build(self.project.tasks)

    def schedule(self) -> ScheduleResult:
        """Compute the schedule, tagging the result with the project ID."""
        return compute_schedule(self.project.tasks, project_id=self.project.id, config=self.config)
