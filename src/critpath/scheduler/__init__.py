"""Scheduler package - Critical Path Method over a task dependency graph.

Main entry points:
- compute_schedule: Schedule a collection of Tasks
- SchedulingService: Schedule a loaded Project

Building blocks, in pipeline order:
- TaskGraph: Read-only lookup tables built once per computation
- topological_order: Cycle-safe ordering
- forward_pass / backward_pass: Earliest and latest windows
- derive_entries / critical_path / check_invariants: Slack and critical tasks
- enumerate_paths / longest_paths: Source-to-sink paths for verification
"""

# Configuration
from .config import DanglingDependencyPolicy, SchedulingConfig

# Core dataclasses
from .core import ScheduleEntry, ScheduleResult, TaskGraph, TimeWindow

# Pipeline steps
from .ordering import topological_order
from .passes import backward_pass, forward_pass, project_duration
from .paths import enumerate_paths, iter_paths, longest_paths, path_duration

# High-level entry points
from .service import SchedulingService, compute_schedule, dangling_warnings
from .slack import check_invariants, critical_path, derive_entries

__all__ = [
    # Configuration
    "DanglingDependencyPolicy",
    "SchedulingConfig",
    # Core dataclasses
    "ScheduleEntry",
    "ScheduleResult",
    "TaskGraph",
    "TimeWindow",
    # Pipeline steps
    "topological_order",
    "forward_pass",
    "backward_pass",
    "project_duration",
    "derive_entries",
    "critical_path",
    "check_invariants",
    # Path enumeration
    "iter_paths",
    "enumerate_paths",
    "longest_paths",
    "path_duration",
    # Entry points
    "compute_schedule",
    "dangling_warnings",
    "SchedulingService",
]
