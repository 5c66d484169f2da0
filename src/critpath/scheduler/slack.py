"""Slack and critical-path derivation."""

from __future__ import annotations

from critpath.exceptions import ScheduleInvariantError
from critpath.logger import get_logger

from .core import ScheduleEntry, TaskGraph, TimeWindow

logger = get_logger()


def derive_entries(
    graph: TaskGraph,
    order: list[str],
    earliest: dict[str, TimeWindow],
    latest: dict[str, TimeWindow],
) -> dict[str, ScheduleEntry]:
    """Combine the two passes into one entry per task, keyed in input order."""
    entries: dict[str, ScheduleEntry] = {}
    for task_id in graph.tasks:
        early = earliest[task_id]
        late = latest[task_id]
        slack = late.start - early.start
        entries[task_id] = ScheduleEntry(
            task_id=task_id,
            duration=graph.duration(task_id),
            earliest_start=early.start,
            earliest_finish=early.finish,
            latest_start=late.start,
            latest_finish=late.finish,
            slack=slack,
            is_critical=slack == 0,
        )

    logger.summary(
        f"Derived slack for {len(entries)} tasks "
        f"({sum(e.is_critical for e in entries.values())} critical)"
    )
    return entries


def critical_path(order: list[str], entries: dict[str, ScheduleEntry]) -> list[str]:
    """Zero-slack task IDs, in topological order."""
    return [task_id for task_id in order if entries[task_id].is_critical]


def check_invariants(entries: dict[str, ScheduleEntry], duration: int) -> None:
    """Verify the arithmetic relations every correct schedule satisfies.

    Raises:
        ScheduleInvariantError: On any violation
    """
    for entry in entries.values():
        if entry.earliest_finish != entry.earliest_start + entry.duration:
            raise ScheduleInvariantError(
                f"Task {entry.task_id}: EF {entry.earliest_finish} != "
                f"ES {entry.earliest_start} + duration {entry.duration}"
            )
        if entry.latest_finish != entry.latest_start + entry.duration:
            raise ScheduleInvariantError(
                f"Task {entry.task_id}: LF {entry.latest_finish} != "
                f"LS {entry.latest_start} + duration {entry.duration}"
            )
        if entry.slack < 0:
            raise ScheduleInvariantError(f"Task {entry.task_id} has negative slack {entry.slack}")

    if not entries:
        return

    max_finish = max(entry.latest_finish for entry in entries.values())
    if max_finish != duration:
        raise ScheduleInvariantError(
            f"Latest finish {max_finish} does not match project duration {duration}"
        )
    if not any(entry.is_critical for entry in entries.values()):
        raise ScheduleInvariantError("Non-empty schedule has no critical task")
