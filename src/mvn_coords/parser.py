"""Parsing of colon-delimited Maven-style coordinate strings."""

from __future__ import annotations

import logging

from .models import (
    DEFAULT_SCOPE,
    DEFAULT_TYPE,
    WILDCARD,
    CoordinateKind,
    DependencyCoordinate,
    ExclusionCoordinate,
    PomCoordinate,
)

logger = logging.getLogger(__name__)

Coordinate = DependencyCoordinate | ExclusionCoordinate | PomCoordinate

EXPECTED_FORMATS: dict[CoordinateKind, str] = {
    CoordinateKind.DEPENDENCY: "<groupId>:<artifactId>:<version>[[:<type>[:<classifier>]]:<scope>]",
    CoordinateKind.EXCLUSION: "<groupId>[:<artifactId>[:<extension>[:<classifier>]]]",
    CoordinateKind.POM: "<groupId>:<artifactId>:<version>",
}


class CoordinateError(ValueError):
    """A coordinate string has the wrong number of segments for its kind."""

    def __init__(self, raw: str, kind: CoordinateKind) -> None:
        """Initialize the error.

        Args:
            raw: The offending coordinate string
            kind: The grammar it was parsed with

        """
        self.raw = raw
        self.kind = kind
        self.expected_format = EXPECTED_FORMATS[kind]
        super().__init__(f"Bad {kind.value} coordinates '{raw}', expected format is {self.expected_format}")


def split_segments(raw: str) -> list[str]:
    """Split a coordinate string on every colon.

    Empty segments are kept wherever they occur, so `"g:a:ext:"` has four
    segments and the last one is `""`.
    """
    return raw.split(":")


def parse_dependency(raw: str) -> DependencyCoordinate:
    """Parse `groupId:artifactId:version[[:type[:classifier]]:scope]`.

    Args:
        raw: Coordinate string with three to six segments

    Returns:
        The dependency, with type `jar`, classifier `""` and scope `compile`
        filled in where the string leaves them out

    Raises:
        CoordinateError: If the segment count is not between three and six

    """
    segments = split_segments(raw)
    if len(segments) == 3:  # noqa: PLR2004
        group_id, artifact_id, version = segments
        return DependencyCoordinate(group_id, artifact_id, version, DEFAULT_TYPE, "", DEFAULT_SCOPE)
    if len(segments) == 4:  # noqa: PLR2004
        group_id, artifact_id, version, scope = segments
        return DependencyCoordinate(group_id, artifact_id, version, DEFAULT_TYPE, "", scope)
    if len(segments) == 5:  # noqa: PLR2004
        group_id, artifact_id, version, type_, scope = segments
        return DependencyCoordinate(group_id, artifact_id, version, type_, "", scope)
    if len(segments) == 6:  # noqa: PLR2004
        return DependencyCoordinate(*segments)
    raise CoordinateError(raw, CoordinateKind.DEPENDENCY)


def parse_exclusion(raw: str) -> ExclusionCoordinate:
    """Parse `groupId[:artifactId[:extension[:classifier]]]`.

    Absent segments default to the `*` wildcard. A present but empty
    classifier (`"g:a:ext:"`) is kept as `""`.

    Raises:
        CoordinateError: If the string has more than four segments

    """
    segments = split_segments(raw)
    if len(segments) > 4:  # noqa: PLR2004
        raise CoordinateError(raw, CoordinateKind.EXCLUSION)
    padded = segments + [WILDCARD] * (4 - len(segments))
    return ExclusionCoordinate(*padded)


def parse_pom(raw: str) -> PomCoordinate:
    """Parse exactly `groupId:artifactId:version`."""
    segments = split_segments(raw)
    if len(segments) != 3:  # noqa: PLR2004
        raise CoordinateError(raw, CoordinateKind.POM)
    return PomCoordinate(*segments)


_PARSERS = {
    CoordinateKind.DEPENDENCY: parse_dependency,
    CoordinateKind.EXCLUSION: parse_exclusion,
    CoordinateKind.POM: parse_pom,
}


def parse(raw: str, kind: CoordinateKind | str = CoordinateKind.DEPENDENCY) -> Coordinate:
    """Parse `raw` with the grammar for `kind`.

    Args:
        raw: The coordinate string
        kind: A `CoordinateKind` or its string value (`"dependency"`, `"exclusion"` or `"pom"`)

    Returns:
        A fresh coordinate record

    """
    kind = CoordinateKind(kind)
    coordinate = _PARSERS[kind](raw)
    logger.debug("Parsed %s coordinates %r as %r", kind.value, raw, coordinate)
    return coordinate
