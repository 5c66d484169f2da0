"""Source-to-sink path enumeration.

The number of paths grows combinatorially with parallel branches, so this is
a verification aid (cross-checking the project duration) rather than part of
schedule computation.
"""

from __future__ import annotations

from collections.abc import Iterator

from critpath.logger import get_logger

from .core import TaskGraph
from .ordering import topological_order

logger = get_logger()


def iter_paths(graph: TaskGraph) -> Iterator[list[str]]:
    """Yield every path from a source task to a sink task.

    Sources are visited in input order and successors in the order their
    tasks appear in the input.

    Raises:
        CycleDetectedError: If the graph is cyclic (checked before walking)
    """
    topological_order(graph)

    for source_id in graph.sources():
        if not graph.successors[source_id]:
            yield [source_id]
            continue

        # stack[i] holds the successors of path[i] not yet tried
        path = [source_id]
        stack: list[Iterator[str]] = [iter(graph.successors[source_id])]

        while stack:
            succ_id = next(stack[-1], None)
            if succ_id is None:
                stack.pop()
                path.pop()
                continue

            path.append(succ_id)
            if graph.successors[succ_id]:
                stack.append(iter(graph.successors[succ_id]))
            else:
                yield list(path)
                path.pop()


def enumerate_paths(graph: TaskGraph, limit: int | None = None) -> list[list[str]]:
    """Collect source-to-sink paths, stopping after ``limit`` when given."""
    paths: list[list[str]] = []
    for path in iter_paths(graph):
        paths.append(path)
        if limit is not None and len(paths) >= limit:
            logger.summary(f"Path enumeration stopped at limit {limit}")
            break

    logger.summary(f"Enumerated {len(paths)} paths")
    return paths


def path_duration(graph: TaskGraph, path: list[str]) -> int:
    """Sum of task durations along a path."""
    return sum(graph.duration(task_id) for task_id in path)


def longest_paths(graph: TaskGraph) -> list[list[str]]:
    """All source-to-sink paths with the maximal total duration."""
    best: list[list[str]] = []
    best_duration = -1
    for path in iter_paths(graph):
        total = path_duration(graph, path)
        if total > best_duration:
            best, best_duration = [path], total
        elif total == best_duration:
            best.append(path)
    return best
