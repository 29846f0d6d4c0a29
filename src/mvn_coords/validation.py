"""Checks run on bound coordinates before they are handed to a resolver.

Parsing never rejects empty identifiers; these checks are where a build
integration decides whether a dependency or exclusion is usable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .models import DependencyCoordinate, ExclusionCoordinate

logger = logging.getLogger(__name__)

KNOWN_SCOPES = frozenset({"compile", "provided", "system", "runtime", "test", "import"})


class ValidationError(ValueError):
    """A coordinate is not usable as a dependency or exclusion."""


def validate_dependency(dependency: DependencyCoordinate, system_path: Path | str | None = None) -> None:
    """Validate a dependency.

    Args:
        dependency: The dependency to check
        system_path: Local file backing a `system` scoped dependency

    Raises:
        ValidationError: If a required identifier is empty or `system_path` does not
            agree with the scope

    """
    for field, value in (
        ("groupId", dependency.group_id),
        ("artifactId", dependency.artifact_id),
        ("version", dependency.version),
    ):
        if not value:
            msg = f"You must specify the '{field}' for dependency {dependency}"
            raise ValidationError(msg)
    if dependency.scope == "system":
        if system_path is None:
            msg = f"You must specify 'systemPath' for dependency {dependency} with scope=system"
            raise ValidationError(msg)
    elif system_path is not None:
        msg = f"You may only specify 'systemPath' for dependencies with scope=system, not {dependency}"
        raise ValidationError(msg)
    if dependency.scope not in KNOWN_SCOPES:
        logger.warning("Unknown scope '%s' for dependency %s", dependency.scope, dependency)


def validate_exclusion(exclusion: ExclusionCoordinate) -> None:
    """Reject an exclusion that names no group, artifact, extension or classifier.

    Explicit wildcards count as named, so `*:*` (exclude every transitive
    artifact) is accepted.
    """
    fields = (exclusion.group_id, exclusion.artifact_id, exclusion.extension, exclusion.classifier)
    if not any(fields):
        msg = f"Exclusion {exclusion} must specify at least one of 'groupId', 'artifactId', 'extension' or 'classifier'"
        raise ValidationError(msg)
