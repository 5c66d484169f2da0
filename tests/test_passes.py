"""Tests for the forward and backward passes."""

from critpath.models import Task
from critpath.scheduler import (
    TaskGraph,
    TimeWindow,
    backward_pass,
    forward_pass,
    project_duration,
    topological_order,
)
from tests.conftest import reference_tasks, task


def run_forward(tasks: list[Task]) -> tuple[TaskGraph, list[str], dict[str, TimeWindow]]:
    graph = TaskGraph.build(tasks)
    order = topological_order(graph)
    return graph, order, forward_pass(graph, order)


class TestForwardPass:
    """Test earliest start/finish computation."""

    def test_reference_network(self) -> None:
        _, _, earliest = run_forward(reference_tasks())

        assert earliest["A"] == TimeWindow(start=0, finish=3)
        assert earliest["B"] == TimeWindow(start=3, finish=5)
        assert earliest["C"] == TimeWindow(start=3, finish=7)
        assert earliest["D"] == TimeWindow(start=7, finish=9)
        assert earliest["E"] == TimeWindow(start=7, finish=10)
        assert earliest["F"] == TimeWindow(start=10, finish=11)

    def test_start_is_latest_dependency_finish(self) -> None:
        tasks = [task("slow", 9), task("fast", 1), task("join", 2, "fast", "slow")]
        _, _, earliest = run_forward(tasks)

        assert earliest["join"] == TimeWindow(start=9, finish=11)

    def test_dangling_dependency_contributes_nothing(self) -> None:
        _, _, earliest = run_forward([task("A", 4, "ghost")])

        assert earliest["A"] == TimeWindow(start=0, finish=4)

    def test_milestone_finishes_when_it_starts(self) -> None:
        _, _, earliest = run_forward([task("A", 5), task("M", 0, "A"), task("B", 1, "M")])

        assert earliest["M"] == TimeWindow(start=5, finish=5)
        assert earliest["B"] == TimeWindow(start=5, finish=6)

    def test_project_duration_is_max_finish(self) -> None:
        _, _, earliest = run_forward(reference_tasks())

        assert project_duration(earliest) == 11

    def test_project_duration_of_nothing_is_zero(self) -> None:
        assert project_duration({}) == 0


class TestBackwardPass:
    """Test latest start/finish computation."""

    def test_reference_network(self) -> None:
        graph, order, earliest = run_forward(reference_tasks())

        latest = backward_pass(graph, order, project_duration(earliest))

        assert latest["F"] == TimeWindow(start=10, finish=11)
        assert latest["E"] == TimeWindow(start=7, finish=10)
        assert latest["D"] == TimeWindow(start=8, finish=10)
        assert latest["C"] == TimeWindow(start=3, finish=7)
        assert latest["B"] == TimeWindow(start=6, finish=8)
        assert latest["A"] == TimeWindow(start=0, finish=3)

    def test_finish_is_earliest_successor_start(self) -> None:
        tasks = [task("A", 1), task("short", 1, "A"), task("long", 5, "A")]
        graph, order, earliest = run_forward(tasks)

        latest = backward_pass(graph, order, project_duration(earliest))

        # long must start at 1 for the project to end at 6
        assert latest["A"] == TimeWindow(start=0, finish=1)
        assert latest["short"] == TimeWindow(start=5, finish=6)

    def test_every_sink_finishes_at_project_duration(self) -> None:
        tasks = [task("A", 2), task("B", 7), task("C", 1, "A")]
        graph, order, earliest = run_forward(tasks)

        latest = backward_pass(graph, order, project_duration(earliest))

        assert latest["B"].finish == 7
        assert latest["C"].finish == 7
        assert latest["A"] == TimeWindow(start=4, finish=6)

    def test_successor_known_only_through_dangling_edge_is_ignored(self) -> None:
        tasks = [task("A", 2), task("B", 5, "ghost")]
        graph, order, earliest = run_forward(tasks)

        latest = backward_pass(graph, order, project_duration(earliest))

        assert latest["A"] == TimeWindow(start=3, finish=5)
