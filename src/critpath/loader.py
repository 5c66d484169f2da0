"""Project loading with config discovery and validation."""

from __future__ import annotations

from pathlib import Path

from .exceptions import MissingReferenceError
from .models import Project
from .parser import ProjectParser
from .scheduler import DanglingDependencyPolicy, SchedulingConfig, TaskGraph, topological_order
from .unified_config import UnifiedConfig, discover_config


def load_project(
    path: Path | str,
    config_path: Path | None = None,
    *,
    config: UnifiedConfig | None = None,
) -> Project:
    """Load and validate a project file.

    Handles:
    1. YAML parsing
    2. Config discovery (unless ``config`` is given)
    3. Validation (duplicate IDs, dangling references per policy, cycles)

    Args:
        path: Path to the project YAML file
        config_path: Optional explicit path to config file
        config: Optional explicit config (overrides discovery)

    Returns:
        The validated Project
    """
    path = Path(path)
    if config is None:
        config = discover_config(path, config_path)

    project = ProjectParser().parse_file(path)
    validate_project(project, config.scheduler if config else None)
    return project


def validate_project(project: Project, config: SchedulingConfig | None = None) -> None:
    """Validate a project for ID uniqueness, references and cycles.

    Dangling dependencies are rejected only under the ``error`` policy.

    Raises:
        DuplicateTaskError: If two tasks share an ID
        InvalidDurationError: If a duration is negative or not an integer
        MissingReferenceError: If a dependency names no task (``error`` policy)
        CycleDetectedError: If the dependency graph is cyclic
    """
    config = config or SchedulingConfig()
    graph = TaskGraph.build(project.tasks)

    if config.dangling_dependencies == DanglingDependencyPolicy.ERROR:
        all_ids = project.get_all_ids()
        for task in project.tasks:
            for dep_id in task.dependencies:
                if dep_id not in all_ids:
                    raise MissingReferenceError(f"Task {task.id} depends on unknown task: {dep_id}")

    topological_order(graph)
