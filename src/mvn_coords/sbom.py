"""Software Bill of Materials (SBOM) generation from parsed coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cyclonedx.builder.this import this_component as cdx_lib_component
from cyclonedx.model.bom import Bom
from cyclonedx.model.component import Component, ComponentScope, ComponentType, Property
from cyclonedx.output.json import JsonV1Dot5
from packageurl import PackageURL

from . import __version__ as version
from .models import DEFAULT_TYPE, DependencyCoordinate, PomCoordinate

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = "SBOM", "cyclonedx_to_json", "to_purl"

OPTIONAL_SCOPES = frozenset({"test", "provided"})


def to_purl(coordinate: DependencyCoordinate | PomCoordinate) -> PackageURL:
    """Build a `pkg:maven` package URL for a coordinate.

    The `type` qualifier is only added for non-`jar` dependencies and the
    `classifier` qualifier only when it is non-empty.

    Raises:
        ValueError: If the coordinate has an empty artifactId, which a package URL
            cannot represent

    """
    if not coordinate.artifact_id:
        msg = f"Cannot build a package URL for {coordinate}: the artifactId is empty"
        raise ValueError(msg)
    qualifiers: dict[str, str] = {}
    if isinstance(coordinate, DependencyCoordinate):
        if coordinate.type != DEFAULT_TYPE:
            qualifiers["type"] = coordinate.type
        if coordinate.classifier:
            qualifiers["classifier"] = coordinate.classifier
    elif isinstance(coordinate, PomCoordinate):
        qualifiers["type"] = "pom"
    return PackageURL(
        type="maven",
        namespace=coordinate.group_id or None,
        name=coordinate.artifact_id,
        version=coordinate.version or None,
        qualifiers=qualifiers or None,
    )


class SBOM:
    """The dependencies declared by one build, optionally rooted at its POM."""

    def __init__(self, dependencies: Iterable[DependencyCoordinate] = (), root: PomCoordinate | None = None) -> None:
        """Initialize SBOM with dependencies and an optional root POM."""
        self.dependencies: frozenset[DependencyCoordinate] = frozenset(dependencies)
        self.root: PomCoordinate | None = root

    def __str__(self) -> str:
        """Return string representation of the SBOM."""
        return ", ".join(str(d) for d in sorted(self.dependencies))

    def to_cyclonedx(self) -> Bom:
        """Convert SBOM to CycloneDX format."""
        bom = Bom()

        bom.metadata.tools.components.add(cdx_lib_component())
        bom.metadata.tools.components.add(
            Component(
                name="mvn-coords",
                type=ComponentType.APPLICATION,
                version=version,
            )
        )

        root_component: Component | None = None
        if self.root is not None:
            purl = to_purl(self.root)
            root_component = Component(
                name=self.root.artifact_id,
                group=self.root.group_id,
                version=self.root.version,
                type=ComponentType.APPLICATION,
                purl=purl,
                bom_ref=str(purl),
            )
            bom.metadata.component = root_component

        components: list[Component] = []
        for dependency in sorted(self.dependencies):
            purl = to_purl(dependency)
            component = Component(
                name=dependency.artifact_id,
                group=dependency.group_id,
                version=dependency.version,
                type=ComponentType.LIBRARY,
                purl=purl,
                bom_ref=f"{purl!s}#{dependency.scope}",
                scope=ComponentScope.OPTIONAL if dependency.scope in OPTIONAL_SCOPES else ComponentScope.REQUIRED,
                properties=[Property(name="maven:scope", value=dependency.scope)],
            )
            bom.components.add(component)
            components.append(component)

        if root_component is not None:
            bom.register_dependency(root_component, components)

        return bom

    def __or__(self, other: SBOM) -> SBOM:
        """Combine two SBOMs, keeping this SBOM's root when it has one."""
        return SBOM(self.dependencies | other.dependencies, self.root if self.root is not None else other.root)

    def __hash__(self) -> int:
        """Return hash of the SBOM."""
        return hash((self.root, self.dependencies))

    def __eq__(self, other: object) -> bool:
        """Check if two SBOMs are equal."""
        return isinstance(other, SBOM) and self.root == other.root and self.dependencies == other.dependencies


def cyclonedx_to_json(bom: Bom, indent: int = 2) -> str:
    """Convert CycloneDX BOM to JSON string."""
    return JsonV1Dot5(bom).output_as_string(indent=indent)
