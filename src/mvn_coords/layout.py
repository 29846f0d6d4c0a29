"""Rendering coordinates onto repository path templates."""

from __future__ import annotations

import re

from .models import DependencyCoordinate, PomCoordinate

GID = "{groupId}"
GID_DIRS = "{groupIdDirs}"
AID = "{artifactId}"
VER = "{version}"
BVER = "{baseVersion}"
EXT = "{extension}"
CLS = "{classifier}"

VARIABLES = frozenset({GID, GID_DIRS, AID, VER, BVER, EXT, CLS})

DEFAULT_LAYOUT = "{groupIdDirs}/{artifactId}/{baseVersion}/{artifactId}-{version}-{classifier}.{extension}"

TOKEN_MATCH = re.compile(r"(\{[^}]*\})|([^{]+)")
SNAPSHOT_TIMESTAMP_MATCH = re.compile(r"^(.*)-(\d{8}\.\d{6})-(\d+)$")


class LayoutError(ValueError):
    """A layout template uses an unsupported variable."""


def base_version(version: str) -> str:
    """Return the base version of a possibly timestamped snapshot.

    `1.0-20240101.123456-7` becomes `1.0-SNAPSHOT`; other versions are
    returned unchanged.
    """
    m = SNAPSHOT_TIMESTAMP_MATCH.match(version)
    if m is None:
        return version
    return f"{m.group(1)}-SNAPSHOT"


class Layout:
    """A path template such as `{groupIdDirs}/{artifactId}/{version}/{artifactId}-{version}.{extension}`."""

    def __init__(self, layout: str = DEFAULT_LAYOUT) -> None:
        """Tokenize the template.

        Raises:
            LayoutError: If the template contains a variable that is not supported

        """
        self.layout = layout
        tokens: list[str] = []
        for m in TOKEN_MATCH.finditer(layout):
            if m.group(1) is not None and m.group(1) not in VARIABLES:
                msg = f"Invalid variable '{m.group()}' in layout, supported variables are {sorted(VARIABLES)}"
                raise LayoutError(msg)
            tokens.append(m.group())
        self.tokens: tuple[str, ...] = tuple(tokens)

    def get_path(self, coordinate: DependencyCoordinate | PomCoordinate) -> str:
        """Render the template for a dependency or POM coordinate.

        An empty classifier renders as nothing and also removes a single `-` or
        `_` left at the end of the preceding literal text.
        """
        if isinstance(coordinate, DependencyCoordinate):
            extension = coordinate.type
            classifier = coordinate.classifier
        else:
            extension = "pom"
            classifier = ""
        path = ""
        for i, token in enumerate(self.tokens):
            if token == GID:
                path += coordinate.group_id
            elif token == GID_DIRS:
                path += coordinate.group_id.replace(".", "/")
            elif token == AID:
                path += coordinate.artifact_id
            elif token == VER:
                path += coordinate.version
            elif token == BVER:
                path += base_version(coordinate.version)
            elif token == EXT:
                path += extension
            elif token == CLS:
                if classifier:
                    path += classifier
                elif i > 0 and self.tokens[i - 1][-1:] in ("-", "_") and path:
                    path = path[:-1]
            else:
                path += token
        return path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.layout!r})"
