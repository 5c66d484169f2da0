"""Pytest configuration and fixtures for critpath tests."""

from __future__ import annotations

import random
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import yaml

from critpath import context
from critpath.logger import reset_logger
from critpath.models import Task


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset the logger and CLI context around each test for isolation."""
    reset_logger()
    context.reset()
    yield
    reset_logger()
    context.reset()


def task(task_id: str, duration: int, *dependencies: str) -> Task:
    """Create a Task whose name mirrors its ID.

    Example:
        task("D", 2, "B", "C")
    """
    return Task(
        id=task_id,
        name=f"Task {task_id}",
        duration=duration,
        dependencies=list(dependencies),
    )


def reference_tasks() -> list[Task]:
    """Six-task network with critical chain A -> C -> E -> F (duration 11)."""
    return [
        task("A", 3),
        task("B", 2, "A"),
        task("C", 4, "A"),
        task("D", 2, "B", "C"),
        task("E", 3, "C"),
        task("F", 1, "D", "E"),
    ]


@pytest.fixture
def reference() -> list[Task]:
    return reference_tasks()


def random_dag(seed: int, size: int = 9, edge_chance: float = 0.3) -> list[Task]:
    """Build a random acyclic task set, shuffled so input order is not topological.

    Task i may only depend on tasks with a smaller index, which rules out cycles.
    """
    rng = random.Random(seed)
    tasks = []
    for i in range(size):
        deps = [f"t{j}" for j in range(i) if rng.random() < edge_chance]
        tasks.append(task(f"t{i}", rng.randint(0, 6), *deps))
    rng.shuffle(tasks)
    return tasks


def write_project(path: Path, tasks: dict[str, Any], project_id: str = "demo") -> Path:
    """Write a project YAML file and return its path."""
    data = {"project": {"id": project_id, "name": "Demo project"}, "tasks": tasks}
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


REFERENCE_YAML_TASKS: dict[str, Any] = {
    "A": {"name": "Requirements", "duration": 3},
    "B": {"name": "Visual design", "duration": 2, "dependencies": ["A"]},
    "C": {"name": "Backend API", "duration": 4, "dependencies": ["A"]},
    "D": {"name": "Frontend build", "duration": 2, "dependencies": ["B", "C"]},
    "E": {"name": "Data migration", "duration": 3, "dependencies": ["C"]},
    "F": {"name": "Launch", "duration": 1, "dependencies": ["D", "E"]},
}
