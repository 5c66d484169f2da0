"""Tests for YAML project parsing."""

from pathlib import Path

import pytest

from critpath.exceptions import ParseError, ValidationError
from critpath.parser import ProjectParser
from tests.conftest import REFERENCE_YAML_TASKS, write_project


class TestProjectParser:
    """Test ProjectParser."""

    def test_parse_reference_file(self, tmp_path: Path) -> None:
        path = write_project(tmp_path / "project.yaml", REFERENCE_YAML_TASKS)

        project = ProjectParser().parse_file(path)

        assert project.id == "demo"
        assert project.name == "Demo project"
        assert [t.id for t in project.tasks] == ["A", "B", "C", "D", "E", "F"]
        d = project.get_task_by_id("D")
        assert d is not None
        assert d.name == "Frontend build"
        assert d.duration == 2
        assert d.dependencies == ["B", "C"]

    def test_single_dependency_string(self) -> None:
        project = ProjectParser().parse_data(
            {
                "project": {"id": "p", "name": "P"},
                "tasks": {
                    "A": {"name": "A", "duration": 1},
                    "B": {"name": "B", "duration": 1, "dependencies": "A"},
                },
            }
        )

        assert project.tasks[1].dependencies == ["A"]

    def test_numeric_ids_become_strings(self) -> None:
        project = ProjectParser().parse_data(
            {
                "project": {"id": 7, "name": "P"},
                "tasks": {
                    1: {"name": "first", "duration": 1},
                    2: {"name": "second", "duration": 1, "dependencies": [1]},
                },
            }
        )

        assert project.id == "7"
        assert [t.id for t in project.tasks] == ["1", "2"]
        assert project.tasks[1].dependencies == ["1"]

    def test_optional_fields(self) -> None:
        project = ProjectParser().parse_data(
            {
                "project": {"id": "p", "name": "P", "description": "About"},
                "tasks": {"A": {"name": "A", "duration": 0, "description": "Kickoff"}},
            }
        )

        assert project.description == "About"
        assert project.tasks[0].description == "Kickoff"
        assert project.tasks[0].is_milestone

    def test_no_tasks(self) -> None:
        project = ProjectParser().parse_data({"project": {"id": "p", "name": "P"}, "tasks": None})

        assert project.tasks == []

    def test_int_and_string_keys_for_same_id_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate task ID after string coercion: 1"):
            ProjectParser().parse_data(
                {
                    "project": {"id": "p", "name": "P"},
                    "tasks": {
                        1: {"name": "int one", "duration": 3},
                        "1": {"name": "str one", "duration": 5},
                    },
                }
            )

    def test_null_dependency_entry_rejected(self) -> None:
        with pytest.raises(ValidationError, match="empty entry"):
            ProjectParser().parse_data(
                {
                    "project": {"id": "p", "name": "P"},
                    "tasks": {
                        "A": {"name": "A", "duration": 1},
                        "B": {"name": "B", "duration": 1, "dependencies": ["A", None]},
                    },
                }
            )

    @pytest.mark.parametrize("duration", [-1, 2.5, "3", True])
    def test_invalid_duration(self, duration: object) -> None:
        with pytest.raises(ValidationError, match="Invalid project structure"):
            ProjectParser().parse_data(
                {
                    "project": {"id": "p", "name": "P"},
                    "tasks": {"A": {"name": "A", "duration": duration}},
                }
            )

    def test_missing_project_header(self) -> None:
        with pytest.raises(ValidationError):
            ProjectParser().parse_data({"tasks": {}})

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="File not found"):
            ProjectParser().parse_file(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("project: [unclosed\n", encoding="utf-8")

        with pytest.raises(ParseError, match="Failed to parse YAML"):
            ProjectParser().parse_file(path)

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ParseError, match="dictionary"):
            ProjectParser().parse_file(path)

    def test_example_file(self) -> None:
        example = Path(__file__).parent.parent / "examples" / "project.yaml"

        project = ProjectParser().parse_file(example)

        assert project.id == "website-relaunch"
        assert len(project.tasks) == 6
