"""Forward and backward CPM passes."""

from __future__ import annotations

from critpath.logger import detail_enabled, get_logger

from .core import TaskGraph, TimeWindow

logger = get_logger()


def forward_pass(graph: TaskGraph, order: list[str]) -> dict[str, TimeWindow]:
    """Compute earliest start/finish for every task.

    ES is 0 for a task without dependencies, otherwise the latest EF among
    its dependencies; EF = ES + duration. Walking ``order`` guarantees every
    dependency is final before its dependents are visited, so one scan is
    enough.

    Args:
        graph: Lookup tables for the task collection
        order: Task IDs in topological order

    Returns:
        Mapping of task ID to its earliest window
    """
    earliest: dict[str, TimeWindow] = {}

    for task_id in order:
        deps = graph.dependencies[task_id]
        start = max((earliest[dep_id].finish for dep_id in deps), default=0)
        earliest[task_id] = TimeWindow(start=start, finish=start + graph.duration(task_id))
        if detail_enabled():
            logger.detail(f"  ES/EF {task_id}: {start}/{earliest[task_id].finish}")

    logger.summary(f"Forward pass: {len(earliest)} tasks")
    return earliest


def project_duration(earliest: dict[str, TimeWindow]) -> int:
    """Largest earliest finish; 0 for an empty project."""
    return max((window.finish for window in earliest.values()), default=0)


def backward_pass(graph: TaskGraph, order: list[str], duration: int) -> dict[str, TimeWindow]:
    """Compute latest start/finish for every task.

    Runs over ``order`` reversed. LF is the project duration for a task
    without successors, otherwise the smallest LS among its successors;
    LS = LF - duration.

    Args:
        graph: Lookup tables for the task collection
        order: Task IDs in topological order
        duration: Project duration from the forward pass

    Returns:
        Mapping of task ID to its latest window
    """
    latest: dict[str, TimeWindow] = {}

    for task_id in reversed(order):
        succs = graph.successors[task_id]
        finish = min((latest[succ_id].start for succ_id in succs), default=duration)
        latest[task_id] = TimeWindow(start=finish - graph.duration(task_id), finish=finish)
        if detail_enabled():
            logger.detail(f"  LS/LF {task_id}: {latest[task_id].start}/{finish}")

    logger.summary(f"Backward pass: {len(latest)} tasks, project duration {duration}")
    return latest
