"""YAML parser for critpath project files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .models import Project, Task
from .schemas import ProjectFileSchema


class ProjectParser:
    """Parser for project YAML files.

    Only handles YAML parsing and model creation. Use load_project() from
    critpath.loader for config discovery and reference validation.
    """

    def parse_file(self, file_path: Path | str) -> Project:
        """Parse a YAML file into a Project."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> Project:
        """Build a Project from already-loaded YAML data."""
        try:
            schema = ProjectFileSchema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid project structure: {e}") from e

        tasks = [
            Task(
                id=str(task_id),
                name=task_data.name,
                duration=task_data.duration,
                dependencies=list(task_data.dependencies),
                description=task_data.description,
            )
            for task_id, task_data in schema.tasks.items()
        ]

        return Project(
            id=schema.project.id,
            name=schema.project.name,
            tasks=tasks,
            description=schema.project.description,
        )
