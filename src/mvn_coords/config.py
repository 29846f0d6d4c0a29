"""Configuration settings for mvn-coords."""

from __future__ import annotations

from enum import Enum
from pathlib import Path  # noqa: TC003

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    CliImplicitFlag,
    SettingsConfigDict,
)

from .layout import DEFAULT_LAYOUT
from .models import CoordinateKind


class OutputFormat(str, Enum):
    """Output formats for mvn-coords."""

    json = "json"
    layout = "layout"
    cyclonedx = "cyclonedx"


class Settings(BaseSettings):
    """Settings for mvn-coords."""

    coords: str | None = Field(
        default=None,
        description="""Coordinate string to parse, for example
            `org.example:lib:1.0`, `org.example:lib:1.0:test` or, with
            `--kind exclusion`, `org.example:*`.""",
    )
    file: Path | None = Field(
        default=None,
        description="""Dependencies file with one dependency coordinate per
            line; `#` starts a comment. Entries with the same versionless key as
            a dependency given by `--coords` are skipped.""",
    )
    kind: CoordinateKind = Field(
        default=CoordinateKind.DEPENDENCY,
        description="""Grammar to parse `--coords` with: `dependency`
            (<groupId>:<artifactId>:<version>[[:<type>[:<classifier>]]:<scope>]),
            `exclusion` (<groupId>[:<artifactId>[:<extension>[:<classifier>]]])
            or `pom` (<groupId>:<artifactId>:<version>).""",
    )
    layout: str = Field(
        default=DEFAULT_LAYOUT,
        description="""Path template used by `--output-format layout`.""",
    )
    strict: CliImplicitFlag[bool] = Field(
        default=False,
        description="""Also run the checks a build element performs before
        resolution (required identifiers, systemPath rules).""",
    )
    system_path: Path | None = Field(
        default=None,
        description="""Local file backing a `system` scoped dependency.""",
    )
    force: CliImplicitFlag[bool] = Field(
        default=False,
        description="""Force the overwrite of the output file if it already
        exists.""",
    )
    log_level: str = Field(default="info", description="Log level")
    output_file: Path | None = Field(
        default=None,
        description="""Output file path. If not provided, the output will be
        written to stdout.""",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.json,
        description="""Output format. `layout` and `cyclonedx` only apply to
            dependency and POM coordinates.""",
    )
    version: CliImplicitFlag[bool] = Field(
        default=False,
        description="""Show the version of mvn-coords and exit.""",
    )

    model_config = SettingsConfigDict(
        cli_parse_args=True,
        cli_prog_name="mvn-coords",
        cli_kebab_case=True,
        env_prefix="MVN_COORDS_",
        nested_model_default_partial_update=True,
    )
