"""Core dataclasses for the CPM scheduling engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from critpath.exceptions import DuplicateTaskError, InvalidDurationError
from critpath.models import Task


def _default_str_list() -> list[str]:
    return []


@dataclass(frozen=True)
class TaskGraph:
    """Read-only lookup tables for one schedule computation.

    Built once from the task collection and handed explicitly to each
    scheduling step. ``dependencies`` and ``successors`` only mention IDs
    present in ``tasks``; IDs that name no task end up in ``dangling``.
    All mappings keep the input order of the tasks.
    """

    tasks: Mapping[str, Task]
    dependencies: Mapping[str, tuple[str, ...]]
    successors: Mapping[str, tuple[str, ...]]
    dangling: Mapping[str, tuple[str, ...]]

    @classmethod
    def build(cls, tasks: Iterable[Task]) -> TaskGraph:
        """Index tasks by ID and derive the successor relation.

        Raises:
            DuplicateTaskError: If two tasks share an ID
            InvalidDurationError: If a duration is not a non-negative integer
        """
        task_map: dict[str, Task] = {}
        for task in tasks:
            if task.id in task_map:
                raise DuplicateTaskError(f"Duplicate task ID: {task.id}")
            # bool is an int subclass but never a meaningful duration
            if isinstance(task.duration, bool) or not isinstance(task.duration, int):
                raise InvalidDurationError(
                    f"Task {task.id} has non-integer duration: {task.duration!r}"
                )
            if task.duration < 0:
                raise InvalidDurationError(
                    f"Task {task.id} has negative duration: {task.duration}"
                )
            task_map[task.id] = task

        dependencies: dict[str, tuple[str, ...]] = {}
        dangling: dict[str, tuple[str, ...]] = {}
        successors: dict[str, list[str]] = {task_id: [] for task_id in task_map}

        for task_id, task in task_map.items():
            known = tuple(dict.fromkeys(d for d in task.dependencies if d in task_map))
            missing = tuple(dict.fromkeys(d for d in task.dependencies if d not in task_map))
            dependencies[task_id] = known
            if missing:
                dangling[task_id] = missing
            for dep_id in known:
                successors[dep_id].append(task_id)

        return cls(
            tasks=MappingProxyType(task_map),
            dependencies=MappingProxyType(dependencies),
            successors=MappingProxyType({k: tuple(v) for k, v in successors.items()}),
            dangling=MappingProxyType(dangling),
        )

    def __len__(self) -> int:
        return len(self.tasks)

    def duration(self, task_id: str) -> int:
        return self.tasks[task_id].duration

    def sources(self) -> list[str]:
        """Tasks with no existing dependencies, in input order."""
        return [task_id for task_id, deps in self.dependencies.items() if not deps]

    def sinks(self) -> list[str]:
        """Tasks nothing depends on, in input order."""
        return [task_id for task_id, succs in self.successors.items() if not succs]


@dataclass(frozen=True)
class TimeWindow:
    """A start/finish pair from one pass (earliest or latest)."""

    start: int
    finish: int


@dataclass(frozen=True)
class ScheduleEntry:
    """Computed CPM values for a single task."""

    task_id: str
    duration: int
    earliest_start: int
    earliest_finish: int
    latest_start: int
    latest_finish: int
    slack: int
    is_critical: bool


@dataclass
class ScheduleResult:
    """Complete result of a schedule computation."""

    project_id: str | None
    project_duration: int
    critical_path: list[str]  # Zero-slack task IDs in topological order
    entries: dict[str, ScheduleEntry]
    order: list[str]  # Topological order used by both passes
    warnings: list[str] = field(default_factory=_default_str_list)

    def entry(self, task_id: str) -> ScheduleEntry:
        return self.entries[task_id]

    def is_critical(self, task_id: str) -> bool:
        return self.entries[task_id].is_critical
