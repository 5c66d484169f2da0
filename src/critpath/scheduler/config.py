"""Configuration classes for the scheduling engine."""

from enum import Enum

from pydantic import BaseModel, Field


class DanglingDependencyPolicy(str, Enum):
    """What to do with a dependency ID that names no task."""

    IGNORE = "ignore"  # Silently treat the edge as no constraint
    WARN = "warn"  # Treat as no constraint, but report a warning
    ERROR = "error"  # Reject the project at load time (engine treats as WARN)


class SchedulingConfig(BaseModel):
    """Configuration for a schedule computation."""

    dangling_dependencies: DanglingDependencyPolicy = DanglingDependencyPolicy.IGNORE

    # Verify EF/LF arithmetic, slack >= 0 and duration agreement after each run
    check_invariants: bool = True

    # Default cap on enumerated paths (None = enumerate all)
    max_paths: int | None = Field(default=None, ge=1)
