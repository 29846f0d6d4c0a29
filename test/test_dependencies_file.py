"""Unit tests for reading dependencies files."""

import logging
from pathlib import Path

import pytest

from mvn_coords.dependencies_file import read_dependencies
from mvn_coords.models import DependencyCoordinate
from mvn_coords.parser import CoordinateError, parse_dependency


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "dependencies.txt"
    path.write_text(text, encoding="utf-8")
    return path


class TestReadDependencies:
    def test_comments_and_blank_lines(self, tmp_path: Path) -> None:
        path = write(
            tmp_path,
            "# runtime dependencies\n"
            "org.example:lib:1.0\n"
            "\n"
            "   \n"
            "  junit:junit:4.13.2:test   # unit tests\n"
            "org.example:lib:1.0:jar:sources:compile#no space before comment\n",
        )
        assert read_dependencies(path) == [
            DependencyCoordinate("org.example", "lib", "1.0"),
            DependencyCoordinate("junit", "junit", "4.13.2", scope="test"),
            DependencyCoordinate("org.example", "lib", "1.0", "jar", "sources", "compile"),
        ]

    def test_empty_file(self, tmp_path: Path) -> None:
        assert read_dependencies(write(tmp_path, "")) == []

    def test_skips_locally_declared(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = write(tmp_path, "org.example:lib:2.0:test\norg.example:lib:2.0:jar:sources:compile\n")
        with caplog.at_level(logging.INFO, logger="mvn_coords.dependencies_file"):
            dependencies = read_dependencies(str(path), declared=[parse_dependency("org.example:lib:1.0")])
        # the sources artifact has a different versionless key
        assert dependencies == [parse_dependency("org.example:lib:2.0:jar:sources:compile")]
        assert "Ignoring dependency org.example:lib:jar" in caplog.text
        assert "already declared locally" in caplog.text

    def test_bad_line(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = write(tmp_path, "org.example:lib:1.0\n# fine\norg.example:broken\n")
        with caplog.at_level(logging.ERROR, logger="mvn_coords.dependencies_file"), pytest.raises(
            CoordinateError, match="Bad dependency coordinates 'org.example:broken'"
        ) as exc_info:
            read_dependencies(path)
        assert exc_info.value.raw == "org.example:broken"
        assert f"{path}:3" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_dependencies(tmp_path / "missing.txt")
