"""Coordinate records produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

WILDCARD = "*"
DEFAULT_TYPE = "jar"
DEFAULT_SCOPE = "compile"


class CoordinateKind(str, Enum):
    """The grammar a coordinate string is parsed with."""

    DEPENDENCY = "dependency"
    EXCLUSION = "exclusion"
    POM = "pom"


@dataclass(frozen=True, order=True)
class DependencyCoordinate:
    """A dependency on a single artifact.

    The string form is always the fully-specified six-segment one,
    `groupId:artifactId:version:type:classifier:scope`, so parsing `str(dep)`
    yields an equal coordinate.
    """

    group_id: str
    artifact_id: str
    version: str
    type: str = DEFAULT_TYPE
    classifier: str = ""
    scope: str = DEFAULT_SCOPE

    @property
    def kind(self) -> CoordinateKind:
        """Return the grammar this coordinate belongs to."""
        return CoordinateKind.DEPENDENCY

    @property
    def versionless_key(self) -> str:
        """Identify the artifact regardless of version.

        The classifier is only appended when it is non-empty, e.g.
        `org.example:lib:jar` or `org.example:lib:jar:sources`.
        """
        key = f"{self.group_id}:{self.artifact_id}:{self.type}"
        if self.classifier:
            key += f":{self.classifier}"
        return key

    def __str__(self) -> str:
        """Return the six-segment coordinate string."""
        return ":".join((self.group_id, self.artifact_id, self.version, self.type, self.classifier, self.scope))

    def to_obj(self) -> dict[str, Any]:
        """Convert the coordinate to a dictionary representation."""
        return {
            "kind": self.kind.value,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "type": self.type,
            "classifier": self.classifier,
            "scope": self.scope,
        }


@dataclass(frozen=True, order=True)
class ExclusionCoordinate:
    """A pattern excluding transitive artifacts from resolution.

    Any field equal to `WILDCARD` matches every value. An empty classifier is a
    real value (the artifact without classifier), not a wildcard.
    """

    group_id: str
    artifact_id: str = WILDCARD
    extension: str = WILDCARD
    classifier: str = WILDCARD

    @property
    def kind(self) -> CoordinateKind:
        """Return the grammar this coordinate belongs to."""
        return CoordinateKind.EXCLUSION

    def __str__(self) -> str:
        """Return the four-segment coordinate string."""
        return ":".join((self.group_id, self.artifact_id, self.extension, self.classifier))

    def to_obj(self) -> dict[str, Any]:
        """Convert the exclusion to a dictionary representation."""
        return {
            "kind": self.kind.value,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "extension": self.extension,
            "classifier": self.classifier,
        }


@dataclass(frozen=True, order=True)
class PomCoordinate:
    """A reference to a project POM by `groupId:artifactId:version`."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def kind(self) -> CoordinateKind:
        return CoordinateKind.POM

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def to_obj(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
        }
