"""Parsing of Maven-style artifact coordinates for build-tool integrations."""

__version__ = "0.1.0"

from .models import (
    WILDCARD,
    CoordinateKind,
    DependencyCoordinate,
    ExclusionCoordinate,
    PomCoordinate,
)
from .dependencies_file import read_dependencies
from .parser import Coordinate, CoordinateError, parse, parse_dependency, parse_exclusion, parse_pom

__all__ = [
    "WILDCARD",
    "Coordinate",
    "CoordinateError",
    "CoordinateKind",
    "DependencyCoordinate",
    "ExclusionCoordinate",
    "PomCoordinate",
    "parse",
    "parse_dependency",
    "parse_exclusion",
    "parse_pom",
    "read_dependencies",
]
