"""Cycle-safe topological ordering of the task graph."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from critpath.exceptions import CycleDetectedError
from critpath.logger import get_logger

from .core import TaskGraph

logger = get_logger()


class _Mark(Enum):
    """Visit state of a task during the depth-first walk."""

    IN_PROGRESS = "in_progress"
    DONE = "done"


def topological_order(graph: TaskGraph) -> list[str]:
    """Order tasks so that every task follows all of its dependencies.

    Depth-first walk with three-colour marking (a task absent from ``marks``
    is unvisited). Dependencies are visited before the task itself is
    appended. Uses an explicit stack so long dependency chains do not hit
    the interpreter recursion limit.

    Args:
        graph: Lookup tables for the task collection

    Returns:
        Task IDs in topological order

    Raises:
        CycleDetectedError: If a task is reached again while still in progress
    """
    marks: dict[str, _Mark] = {}
    order: list[str] = []

    for root_id in graph.tasks:
        if root_id in marks:
            continue

        marks[root_id] = _Mark.IN_PROGRESS
        stack: list[tuple[str, Iterator[str]]] = [(root_id, iter(graph.dependencies[root_id]))]

        while stack:
            task_id, pending = stack[-1]
            dep_id = next(pending, None)

            if dep_id is None:
                stack.pop()
                marks[task_id] = _Mark.DONE
                order.append(task_id)
                logger.debug(f"  Ordered {task_id} at position {len(order) - 1}")
                continue

            mark = marks.get(dep_id)
            if mark is _Mark.DONE:
                continue
            if mark is _Mark.IN_PROGRESS:
                path = [entry[0] for entry in stack]
                cycle = path[path.index(dep_id) :] + [dep_id]
                logger.detail(f"Cycle found while visiting {task_id}: {' -> '.join(cycle)}")
                raise CycleDetectedError(cycle)

            marks[dep_id] = _Mark.IN_PROGRESS
            stack.append((dep_id, iter(graph.dependencies[dep_id])))

    logger.summary(f"Topological order: {len(order)} tasks")
    return order
