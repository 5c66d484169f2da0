"""Pydantic schemas for YAML project files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictInt, field_validator


class TaskSchema(BaseModel):
    """Schema for a single task entry."""

    name: str
    duration: StrictInt = Field(ge=0)
    dependencies: list[str] = Field(default_factory=list)
    description: str | None = None

    @field_validator("dependencies", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept a single ID or a list of IDs."""
        if v is None:
            return []
        if isinstance(v, list):
            items: list[str] = []
            for item in v:  # type: ignore[misc]
                if item is None:
                    raise ValueError("Dependency list contains an empty entry")
                items.append(str(item))
            return items
        return [str(v)]


class ProjectInfoSchema(BaseModel):
    """Schema for the project header."""

    id: str
    name: str
    description: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_string(cls, v: Any) -> str:
        """YAML reads bare numbers as ints; IDs are always strings."""
        return str(v)


class ProjectFileSchema(BaseModel):
    """Schema for an entire project file."""

    project: ProjectInfoSchema
    tasks: dict[str, TaskSchema] = Field(default_factory=dict)

    @field_validator("tasks", mode="before")
    @classmethod
    def coerce_task_ids(cls, v: Any) -> Any:
        """Stringify task keys; `1:` and `"1":` together are a duplicate."""
        if v is None:
            return {}
        if isinstance(v, dict):
            tasks: dict[str, Any] = {}
            for key, value in v.items():  # type: ignore[misc]
                task_id = str(key)
                if task_id in tasks:
                    raise ValueError(f"Duplicate task ID after string coercion: {task_id}")
                tasks[task_id] = value
            return tasks
        return v
