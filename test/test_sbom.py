"""Unit tests for SBOM generation."""

import json
from unittest import TestCase

import pytest
from cyclonedx.model.component import ComponentScope

from mvn_coords.models import PomCoordinate
from mvn_coords.parser import parse_dependency
from mvn_coords.sbom import SBOM, cyclonedx_to_json, to_purl


class TestPurl(TestCase):
    def test_plain_jar(self) -> None:
        assert str(to_purl(parse_dependency("org.example:lib:1.0"))) == "pkg:maven/org.example/lib@1.0"

    def test_type_and_classifier_qualifiers(self) -> None:
        purl = to_purl(parse_dependency("org.example:lib:1.0:test-jar:tests:test"))
        assert purl.qualifiers == {"classifier": "tests", "type": "test-jar"}

    def test_pom(self) -> None:
        assert str(to_purl(PomCoordinate("org.example", "parent", "2.0"))) == "pkg:maven/org.example/parent@2.0?type=pom"


class TestSBOM(TestCase):
    def setUp(self) -> None:
        self.root = PomCoordinate("org.example", "app", "1.0")
        self.compile_dep = parse_dependency("org.example:lib:1.0")
        self.test_dep = parse_dependency("junit:junit:4.13.2:test")
        self.sbom = SBOM(dependencies=[self.compile_dep, self.test_dep], root=self.root)

    def test_str(self) -> None:
        assert str(self.sbom) == "junit:junit:4.13.2:jar::test, org.example:lib:1.0:jar::compile"

    def test_components(self) -> None:
        bom = self.sbom.to_cyclonedx()
        scopes = {c.name: c.scope for c in bom.components}
        assert scopes == {"lib": ComponentScope.REQUIRED, "junit": ComponentScope.OPTIONAL}
        assert bom.metadata.component is not None
        assert bom.metadata.component.name == "app"

    def test_json(self) -> None:
        output = json.loads(cyclonedx_to_json(self.sbom.to_cyclonedx()))
        purls = sorted(c["purl"] for c in output["components"])
        assert purls == ["pkg:maven/junit/junit@4.13.2", "pkg:maven/org.example/lib@1.0"]
        root_ref = output["metadata"]["component"]["bom-ref"]
        root_deps = next(d for d in output["dependencies"] if d["ref"] == root_ref)
        assert len(root_deps["dependsOn"]) == 2

    def test_union(self) -> None:
        other = SBOM(dependencies=[parse_dependency("g:a:1.0")])
        combined = self.sbom | other
        assert combined.root == self.root
        assert len(combined.dependencies) == 3
        assert combined == SBOM([*self.sbom.dependencies, *other.dependencies], self.root)

    def test_empty_artifact_id(self) -> None:
        sbom = SBOM(dependencies=[parse_dependency("g::1.0")])
        with pytest.raises(ValueError, match="Cannot build a package URL for g::1.0:jar::compile"):
            sbom.to_cyclonedx()
