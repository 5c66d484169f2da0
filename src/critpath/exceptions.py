"""Custom exceptions for critpath."""

from __future__ import annotations


class CritPathError(Exception):
    """Base exception for all critpath errors."""

    pass


class ValidationError(CritPathError):
    """Raised when validation fails."""

    pass


class CycleDetectedError(ValidationError):
    """Raised when the dependency graph contains a cycle.

    The ``cycle`` attribute lists the task IDs on the cycle, with the first
    ID repeated at the end (e.g. ``["a", "b", "a"]``).
    """

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Circular dependency detected: {' -> '.join(cycle)}")


class DuplicateTaskError(ValidationError):
    """Raised when two tasks share the same ID."""

    pass


class InvalidDurationError(ValidationError):
    """Raised when a task duration is negative or not an integer."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a referenced ID does not exist."""

    pass


class ParseError(CritPathError):
    """Raised when YAML parsing fails."""

    pass


class ScheduleInvariantError(AssertionError):
    """Raised when a computed schedule violates an internal invariant.

    This signals a defect in the scheduler itself, never bad input, so it
    deliberately sits outside the CritPathError hierarchy.
    """

    pass
