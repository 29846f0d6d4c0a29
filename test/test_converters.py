"""Unit tests for resolver record conversion."""

from pathlib import Path

from mvn_coords.converters import merge_exclusions, to_resolver_obj
from mvn_coords.parser import parse_dependency, parse_exclusion


class TestMergeExclusions:
    def test_keeps_first_seen_order(self) -> None:
        a = parse_exclusion("org.a")
        b = parse_exclusion("org.b:lib")
        c = parse_exclusion("org.c:lib:jar:")
        assert merge_exclusions([b, a], [a, c], None) == [b, a, c]

    def test_empty(self) -> None:
        assert merge_exclusions() == []


class TestToResolverObj:
    def test_dependency_with_exclusions(self) -> None:
        dep = parse_dependency("org.example:lib:1.0:test-jar:tests:test")
        obj = to_resolver_obj(
            dep,
            exclusions=[parse_exclusion("org.slf4j")],
            global_exclusions=[parse_exclusion("org.slf4j"), parse_exclusion("junit:junit:jar:")],
        )
        assert obj["artifact"] == {
            "groupId": "org.example",
            "artifactId": "lib",
            "version": "1.0",
            "extension": "test-jar",
            "classifier": "tests",
            "properties": {},
        }
        assert obj["scope"] == "test"
        assert obj["exclusions"] == [
            {"groupId": "org.slf4j", "artifactId": "*", "extension": "*", "classifier": "*"},
            {"groupId": "junit", "artifactId": "junit", "extension": "jar", "classifier": ""},
        ]

    def test_system_scope_local_path(self) -> None:
        obj = to_resolver_obj(parse_dependency("g:a:1.0:system"), system_path=Path("lib") / "a.jar")
        assert obj["artifact"]["properties"] == {"localPath": str(Path("lib") / "a.jar")}

    def test_local_path_ignored_outside_system_scope(self) -> None:
        obj = to_resolver_obj(parse_dependency("g:a:1.0"), system_path="lib/a.jar")
        assert obj["artifact"]["properties"] == {}
