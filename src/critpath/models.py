"""Data models for critpath."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_str_list() -> list[str]:
    return []


def _default_task_list() -> list[Task]:
    return []


@dataclass
class Task:
    """A unit of schedulable work.

    Dependencies are finish-to-start: every listed task must finish before
    this one may start. IDs that name no task in the same collection are
    treated as no constraint.
    """

    id: str
    name: str
    duration: int
    dependencies: list[str] = field(default_factory=_default_str_list)
    description: str | None = None

    @property
    def is_milestone(self) -> bool:
        """Zero-duration tasks mark a point in time."""
        return self.duration == 0


@dataclass
class Project:
    """A named collection of tasks."""

    id: str
    name: str
    tasks: list[Task] = field(default_factory=_default_task_list)
    description: str | None = None

    def get_task_by_id(self, task_id: str) -> Task | None:
        """Get a task by its ID."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_all_ids(self) -> set[str]:
        """Get all task IDs."""
        return {task.id for task in self.tasks}

    def without_task(self, task_id: str) -> Project:
        """Return a copy of the project with one task removed.

        References to the removed task stay in the remaining tasks'
        dependency lists and become dangling (no constraint).
        """
        return Project(
            id=self.id,
            name=self.name,
            tasks=[task for task in self.tasks if task.id != task_id],
            description=self.description,
        )
