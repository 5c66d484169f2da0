"""critpath - Critical Path Method project scheduling."""

from .exceptions import (
    CritPathError,
    CycleDetectedError,
    DuplicateTaskError,
    InvalidDurationError,
    MissingReferenceError,
    ParseError,
    ScheduleInvariantError,
    ValidationError,
)
from .models import Project, Task
from .scheduler import ScheduleEntry, ScheduleResult, SchedulingConfig, compute_schedule

__version__ = "0.1.0"

__all__ = [
    "Task",
    "Project",
    "ScheduleEntry",
    "ScheduleResult",
    "SchedulingConfig",
    "compute_schedule",
    "CritPathError",
    "ValidationError",
    "CycleDetectedError",
    "DuplicateTaskError",
    "InvalidDurationError",
    "MissingReferenceError",
    "ParseError",
    "ScheduleInvariantError",
]
