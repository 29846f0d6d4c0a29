"""Translation of parsed coordinates into the records a resolver consumes."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import DependencyCoordinate, ExclusionCoordinate


def merge_exclusions(*groups: Iterable[ExclusionCoordinate] | None) -> list[ExclusionCoordinate]:
    """Concatenate exclusion collections, keeping the first occurrence of each.

    `None` groups are skipped.
    """
    merged: dict[ExclusionCoordinate, None] = {}
    for group in groups:
        if group is None:
            continue
        for exclusion in group:
            merged.setdefault(exclusion, None)
    return list(merged)


def to_resolver_obj(
    dependency: DependencyCoordinate,
    exclusions: Iterable[ExclusionCoordinate] = (),
    global_exclusions: Iterable[ExclusionCoordinate] = (),
    system_path: Path | str | None = None,
) -> dict[str, Any]:
    """Build the record handed to the external resolver for one dependency.

    Args:
        dependency: The dependency to resolve
        exclusions: Exclusions declared on the dependency itself
        global_exclusions: Exclusions declared for the whole dependency set
        system_path: Local file for a `system` scoped dependency

    Returns:
        The artifact coordinates, scope, merged exclusions and, for `system`
        scope only, a `localPath` property

    """
    properties: dict[str, str] = {}
    if dependency.scope == "system" and system_path is not None:
        properties["localPath"] = str(Path(system_path))
    return {
        "artifact": {
            "groupId": dependency.group_id,
            "artifactId": dependency.artifact_id,
            "version": dependency.version,
            "extension": dependency.type,
            "classifier": dependency.classifier,
            "properties": properties,
        },
        "scope": dependency.scope,
        "optional": False,
        "exclusions": [
            {
                "groupId": exclusion.group_id,
                "artifactId": exclusion.artifact_id,
                "extension": exclusion.extension,
                "classifier": exclusion.classifier,
            }
            for exclusion in merge_exclusions(exclusions, global_exclusions)
        ],
    }
