"""Reading dependency lists with one coordinate string per line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .parser import CoordinateError, parse_dependency

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import DependencyCoordinate

logger = logging.getLogger(__name__)


def read_dependencies(path: Path | str, declared: Iterable[DependencyCoordinate] = ()) -> list[DependencyCoordinate]:
    """Read a dependencies file.

    Everything after a `#` is a comment. Lines are trimmed and blank lines are
    skipped; every other line goes through the dependency grammar. Entries
    whose versionless key matches a dependency in `declared` are skipped, since
    a locally declared dependency takes precedence over the file.

    Args:
        path: The dependencies file, read as UTF-8
        declared: Dependencies already declared locally

    Returns:
        The dependencies in file order

    Raises:
        CoordinateError: If a line has the wrong number of segments
        OSError: If the file cannot be read

    """
    path = Path(path)
    declared_keys = {dependency.versionless_key for dependency in declared}
    dependencies: list[DependencyCoordinate] = []
    with path.open(encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.split("#", 1)[0].strip()  # noqa: PLW2901
            if not line:
                continue
            try:
                dependency = parse_dependency(line)
            except CoordinateError:
                logger.error("Bad dependency at %s:%d", path, lineno)  # noqa: TRY400
                raise
            if dependency.versionless_key in declared_keys:
                logger.info(
                    "Ignoring dependency %s from %s, already declared locally", dependency.versionless_key, path
                )
                continue
            dependencies.append(dependency)
    logger.debug("Read %d dependencies from %s", len(dependencies), path)
    return dependencies
