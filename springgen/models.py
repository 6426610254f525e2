"""Pydantic v2 models for the project generator.

Defines the closed choice enums, the per-run ``ProjectSpec`` and the value
objects produced by the assemblers and renderers.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import UnsupportedConfigFormatError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class BuildTool(str, Enum):
    """Build tool for the generated project."""
    MAVEN = "maven"
    GRADLE = "gradle"

    @classmethod
    def parse(cls, raw: str) -> Optional["BuildTool"]:
        """Return the matching member, or ``None`` if *raw* is not recognised."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class ConfigFormat(str, Enum):
    """Format of the generated ``application.<format>`` file."""
    PROPERTIES = "properties"
    YML = "yml"

    @classmethod
    def parse(cls, raw: "str | ConfigFormat") -> "ConfigFormat":
        """Return the matching member.

        Raises:
            UnsupportedConfigFormatError: For any other value.
        """
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise UnsupportedConfigFormatError(str(raw)) from None


class DatabaseType(str, Enum):
    """Database backing the generated project.

    ``OTHER`` tags an unrecognised choice; assemblers resolve it through
    their fallback branch (H2) and report a warning.
    """
    H2 = "h2"
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: "str | DatabaseType") -> "DatabaseType":
        """Return the matching member, or ``OTHER`` for unknown values."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.OTHER


def unknown_database_warning(label: Optional[str] = None) -> str:
    """Return the advisory warning for a database type with no driver or URL."""
    subject = f"Unknown database type '{label}'" if label else "Unknown database type"
    return f"{subject}. Falling back to the H2 driver and in-memory datasource."


# ---------------------------------------------------------------------------
# Project specification
# ---------------------------------------------------------------------------

_JAVA_PACKAGE = re.compile(r"^[a-z_][a-z0-9_]*(\.[a-z_][a-z0-9_]*)*$")


class ProjectSpec(BaseModel):
    """Project-level choices collected once per generation run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Project directory and artifact name")
    base_package: str = Field(..., description="Root Java package, e.g. com.example.shop")
    build_tool: BuildTool = Field(default=BuildTool.MAVEN)
    config_format: ConfigFormat = Field(default=ConfigFormat.PROPERTIES)
    database_type: DatabaseType = Field(default=DatabaseType.H2)
    database_name: str = Field(default="", description="Ignored for H2")
    database_dialect: str = Field(default="", description="Explicit Hibernate dialect override")
    create_if_not_exists: bool = Field(default=False)
    username: str = Field(default="")
    password: str = Field(default="")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("project name must be a single directory name")
        if "'" in value or "\"" in value:
            raise ValueError("project name must not contain quote characters")
        return value

    @field_validator("base_package")
    @classmethod
    def _check_base_package(cls, value: str) -> str:
        value = value.strip().lower()
        if not _JAVA_PACKAGE.match(value):
            raise ValueError(
                f"'{value}' is not a valid Java package (expected e.g. com.example.app)"
            )
        return value

    @field_validator("config_format", mode="before")
    @classmethod
    def _coerce_config_format(cls, value: object) -> object:
        if isinstance(value, str):
            return ConfigFormat.parse(value)
        return value

    @field_validator("database_type", mode="before")
    @classmethod
    def _coerce_database_type(cls, value: object) -> object:
        if isinstance(value, str):
            return DatabaseType.parse(value)
        return value

    @classmethod
    def from_choices(
        cls,
        *,
        project_name: str,
        base_package: str,
        build_tool: str = "maven",
        config_format: str = "properties",
        database_type: str = "h2",
        database_name: str = "",
        database_dialect: str = "",
        create_if_not_exists: bool = False,
        username: str = "",
        password: str = "",
    ) -> tuple["ProjectSpec", list[str]]:
        """Build a spec from raw user strings, resolving enum fallbacks.

        Unknown build tools fall back to Maven with an advisory warning in the
        returned list.  Unknown database types become ``DatabaseType.OTHER``
        silently; the assemblers report that fallback once per project.
        Unknown config formats raise :class:`UnsupportedConfigFormatError`.
        """
        warnings: list[str] = []

        tool = BuildTool.parse(build_tool)
        if tool is None:
            warnings.append(
                f"Unknown build tool '{build_tool}'. Falling back to {BuildTool.MAVEN.value}."
            )
            tool = BuildTool.MAVEN

        db_type = DatabaseType.parse(database_type)

        spec = cls(
            project_name=project_name,
            base_package=base_package,
            build_tool=tool,
            config_format=ConfigFormat.parse(config_format),
            database_type=db_type,
            database_name=database_name.strip(),
            database_dialect=database_dialect.strip(),
            create_if_not_exists=create_if_not_exists,
            username=username.strip(),
            password=password,
        )
        return spec, warnings


# ---------------------------------------------------------------------------
# Generation results
# ---------------------------------------------------------------------------

class RenderResult(BaseModel):
    """Text produced by an assembler plus any advisory warnings."""

    model_config = ConfigDict(frozen=True)

    content: str
    warnings: tuple[str, ...] = ()


class Artifact(BaseModel):
    """One generated file: a path relative to the project root and its text."""

    model_config = ConfigDict(frozen=True)

    relative_path: PurePosixPath
    content: str


class ScaffoldPlan(BaseModel):
    """Everything a generation run will write, in write order.

    ``directories`` lists project-relative directories in creation order
    (the project root itself is ``PurePosixPath(".")``).  Every artifact's
    parent appears in ``directories``.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    directories: tuple[PurePosixPath, ...]
    artifacts: tuple[Artifact, ...]
    warnings: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_parents_planned(self) -> "ScaffoldPlan":
        planned = set(self.directories)
        for item in self.artifacts:
            if item.relative_path.parent not in planned:
                raise ValueError(
                    f"artifact {item.relative_path} has no planned parent directory"
                )
        return self

    def artifact(self, relative_path: str | PurePosixPath) -> Artifact:
        """Return the artifact at *relative_path*.

        Raises:
            KeyError: If the plan contains no such artifact.
        """
        wanted = PurePosixPath(relative_path)
        for item in self.artifacts:
            if item.relative_path == wanted:
                return item
        raise KeyError(str(wanted))
