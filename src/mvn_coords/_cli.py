"""Command-line interface for mvn-coords."""

from __future__ import annotations

import json
import logging
import sys

from . import __version__ as mvn_coords_version
from .config import OutputFormat, Settings
from .dependencies_file import read_dependencies
from .layout import Layout
from .logger import setup_logger
from .models import DependencyCoordinate, ExclusionCoordinate, PomCoordinate
from .parser import Coordinate, parse
from .sbom import SBOM, cyclonedx_to_json
from .validation import validate_dependency, validate_exclusion

logger = logging.getLogger(__name__)


def load_coordinates(settings: Settings) -> list[Coordinate]:
    """Parse `--coords` and read `--file`, in that order."""
    coordinates: list[Coordinate] = []
    if settings.coords is not None:
        coordinates.append(parse(settings.coords, settings.kind))
    if settings.file is not None:
        declared = [c for c in coordinates if isinstance(c, DependencyCoordinate)]
        coordinates.extend(read_dependencies(settings.file, declared=declared))
    return coordinates


def render(coordinates: list[Coordinate], settings: Settings) -> str:
    """Render parsed coordinates in the requested output format.

    A single `--coords` value renders as one JSON object; anything read from a
    dependencies file renders as a list.

    Raises:
        ValueError: If the output format does not apply to the coordinates' kind

    """
    if settings.output_format == OutputFormat.json:
        if settings.file is None and len(coordinates) == 1:
            return json.dumps(coordinates[0].to_obj(), indent=4)
        return json.dumps([c.to_obj() for c in coordinates], indent=4)
    if any(isinstance(c, ExclusionCoordinate) for c in coordinates):
        msg = f"Output format `{settings.output_format.value}` does not apply to exclusions"
        raise ValueError(msg)
    if settings.output_format == OutputFormat.layout:
        layout = Layout(settings.layout)
        return "\n".join(layout.get_path(c) for c in coordinates)
    if settings.output_format == OutputFormat.cyclonedx:
        root = next((c for c in coordinates if isinstance(c, PomCoordinate)), None)
        sbom = SBOM(dependencies=(c for c in coordinates if isinstance(c, DependencyCoordinate)), root=root)
        return cyclonedx_to_json(sbom.to_cyclonedx())
    msg = f"Unsupported output format {settings.output_format}"
    raise NotImplementedError(msg)


def main() -> None:
    settings = Settings()
    setup_logger(settings.log_level)

    logger.debug("Starting mvn-coords with settings: %s", settings)

    if settings.version:
        logger.info("mvn-coords version %s", mvn_coords_version)
        return

    if settings.coords is None and settings.file is None:
        logger.error("No coordinates given, use --coords or --file")
        return

    try:
        coordinates = load_coordinates(settings)
        if settings.strict:
            for i, coordinate in enumerate(coordinates):
                if isinstance(coordinate, DependencyCoordinate):
                    # --system-path belongs to the --coords dependency only
                    from_coords = i == 0 and settings.coords is not None
                    validate_dependency(coordinate, settings.system_path if from_coords else None)
                elif isinstance(coordinate, ExclusionCoordinate):
                    validate_exclusion(coordinate)
        output = render(coordinates, settings)
    except (ValueError, OSError) as e:
        logger.error("%s", e)  # noqa: TRY400
        return

    if settings.output_file is None:
        sys.stdout.write(output + "\n")
        return
    if not settings.force and settings.output_file.exists():
        logger.error("%s already exists!\nRe-run with `--force` to overwrite the file.\n", settings.output_file)
        return
    settings.output_file.write_text(output + "\n")
    logger.info("Output saved to %s", settings.output_file.absolute())
