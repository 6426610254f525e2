"""springgen configuration.

Typed settings for the generator itself (where to write, whether to
overwrite, which framework versions to pin in generated manifests).  All
settings use Pydantic v2 models so they are validated at construction time
and can be serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class VersionConfig(BaseModel):
    """Framework and library versions pinned in generated build manifests."""

    spring_boot: str = Field(default="3.2.5")
    dependency_management: str = Field(
        default="1.1.4", description="io.spring.dependency-management Gradle plugin"
    )
    java: str = Field(default="17", description="Java release targeted by the project")
    springdoc: str = Field(default="2.3.0")
    mysql_connector: str = Field(default="8.0.33")


class Config(BaseModel):
    """Global generator configuration.

    Instances are typically created once by the CLI entry point and handed to
    ``ProjectGenerator``.
    """

    output_dir: Path = Field(default=Path("."))
    overwrite: bool = Field(default=False, description="Replace files that already exist")
    api_server_url: str = Field(
        default="http://localhost:8080",
        description="Server URL advertised by the generated OpenAPI configuration",
    )
    versions: VersionConfig = Field(default_factory=VersionConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SPRINGGEN_OUTPUT_DIR, SPRINGGEN_OVERWRITE, SPRINGGEN_API_SERVER_URL,
            SPRINGGEN_SPRING_BOOT_VERSION, SPRINGGEN_JAVA_VERSION,
            SPRINGGEN_SPRINGDOC_VERSION.
        """
        version_kwargs: dict[str, Any] = {}
        if os.environ.get("SPRINGGEN_SPRING_BOOT_VERSION"):
            version_kwargs["spring_boot"] = os.environ["SPRINGGEN_SPRING_BOOT_VERSION"]
        if os.environ.get("SPRINGGEN_JAVA_VERSION"):
            version_kwargs["java"] = os.environ["SPRINGGEN_JAVA_VERSION"]
        if os.environ.get("SPRINGGEN_SPRINGDOC_VERSION"):
            version_kwargs["springdoc"] = os.environ["SPRINGGEN_SPRINGDOC_VERSION"]

        kwargs: dict[str, Any] = {"versions": VersionConfig(**version_kwargs)}
        if os.environ.get("SPRINGGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SPRINGGEN_OUTPUT_DIR"])
        if os.environ.get("SPRINGGEN_API_SERVER_URL"):
            kwargs["api_server_url"] = os.environ["SPRINGGEN_API_SERVER_URL"]
        overwrite = os.environ.get("SPRINGGEN_OVERWRITE", "")
        kwargs["overwrite"] = overwrite.strip().lower() in _TRUTHY

        return cls(**kwargs)
