"""Build manifest generation (Maven ``pom.xml`` / Gradle ``build.gradle``).

The dependency set is resolved in Python once and then printed by the
build tool's template, so both manifests list the same libraries in their
own syntax:

- web + JPA starters (always)
- exactly one database driver, selected by ``DatabaseType``
- Lombok (compile-only / optional)
- the Spring Boot test starter
- the springdoc OpenAPI UI (Maven only)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import VersionConfig
from ..models import (
    BuildTool,
    DatabaseType,
    ProjectSpec,
    RenderResult,
    unknown_database_warning,
)
from .templates import TemplateRenderer


class Scope(str, Enum):
    """How a dependency is used by the generated project."""
    COMPILE = "compile"
    RUNTIME = "runtime"
    TEST = "test"
    ANNOTATION_PROCESSOR = "annotation_processor"


@dataclass(frozen=True)
class Dependency:
    """A Maven-coordinate dependency of the generated project."""

    group: str
    artifact: str
    scope: Scope = Scope.COMPILE
    version: Optional[str] = None

    @property
    def coordinate(self) -> str:
        """``group:artifact[:version]`` as written in Gradle manifests."""
        parts = [self.group, self.artifact]
        if self.version:
            parts.append(self.version)
        return ":".join(parts)

    @property
    def maven_scope(self) -> Optional[str]:
        """The ``<scope>`` element value, ``None`` for the default scope."""
        if self.scope in (Scope.RUNTIME, Scope.TEST):
            return self.scope.value
        return None

    @property
    def maven_optional(self) -> bool:
        return self.scope is Scope.ANNOTATION_PROCESSOR


# Gradle configurations per scope, in declaration order.
GRADLE_CONFIGURATIONS: dict[Scope, tuple[str, ...]] = {
    Scope.COMPILE: ("implementation",),
    Scope.RUNTIME: ("runtimeOnly",),
    Scope.TEST: ("testImplementation",),
    Scope.ANNOTATION_PROCESSOR: ("compileOnly", "annotationProcessor"),
}

MANIFEST_FILES: dict[BuildTool, str] = {
    BuildTool.MAVEN: "pom.xml",
    BuildTool.GRADLE: "build.gradle",
}

_TEMPLATES: dict[BuildTool, str] = {
    BuildTool.MAVEN: "build/pom.xml.j2",
    BuildTool.GRADLE: "build/build.gradle.j2",
}

BASE_DEPENDENCIES: tuple[Dependency, ...] = (
    Dependency("org.springframework.boot", "spring-boot-starter-web"),
    Dependency("org.springframework.boot", "spring-boot-starter-data-jpa"),
)

LOMBOK = Dependency("org.projectlombok", "lombok", Scope.ANNOTATION_PROCESSOR)
TEST_STARTER = Dependency("org.springframework.boot", "spring-boot-starter-test", Scope.TEST)


def database_drivers(versions: VersionConfig) -> dict[DatabaseType, Dependency]:
    """Driver dependency per recognised database type."""
    return {
        DatabaseType.H2: Dependency("com.h2database", "h2", Scope.RUNTIME),
        DatabaseType.MYSQL: Dependency(
            "mysql", "mysql-connector-java", Scope.RUNTIME, versions.mysql_connector
        ),
        DatabaseType.POSTGRESQL: Dependency("org.postgresql", "postgresql", Scope.RUNTIME),
    }


class BuildDescriptorAssembler:
    """Builds the Maven or Gradle manifest for the generated project."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        versions: VersionConfig | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.versions = versions or VersionConfig()

    # -- Dependency resolution ---------------------------------------------

    def dependencies(
        self, build_tool: BuildTool, database_type: DatabaseType, label: Optional[str] = None
    ) -> tuple[list[Dependency], list[str]]:
        """Return the ordered dependency list and any fallback warnings.

        *label* is the raw database choice named in the fallback warning.
        """
        warnings: list[str] = []
        drivers = database_drivers(self.versions)
        driver = drivers.get(database_type)
        if driver is None:
            warnings.append(unknown_database_warning(label))
            driver = drivers[DatabaseType.H2]

        deps = [*BASE_DEPENDENCIES, driver, LOMBOK, TEST_STARTER]
        if build_tool is BuildTool.MAVEN:
            deps.append(
                Dependency(
                    "org.springdoc",
                    "springdoc-openapi-starter-webmvc-ui",
                    version=self.versions.springdoc,
                )
            )
        return deps, warnings

    # -- Rendering ---------------------------------------------------------

    def assemble(
        self,
        build_tool: str | BuildTool,
        project_name: str,
        base_package: str,
        database_type: str | DatabaseType,
        *,
        main_class: str | None = None,
    ) -> RenderResult:
        """Render the build manifest.

        Args:
            build_tool: ``"maven"`` or ``"gradle"``; anything else falls back
                to Maven with a warning.
            project_name: Artifact name (Maven ``artifactId``, Gradle jar name).
            base_package: Group id.
            database_type: Selects the driver dependency; unknown values fall
                back to H2 with a warning.
            main_class: Fully-qualified entry-point class.  When omitted the
                manifest names none and Spring Boot locates the single
                ``@SpringBootApplication`` class itself.

        Returns:
            The rendered manifest and any advisory warnings.
        """
        warnings: list[str] = []
        tool = build_tool if isinstance(build_tool, BuildTool) else BuildTool.parse(build_tool)
        if tool is None:
            warnings.append(f"Unknown build tool '{build_tool}'. Generating a Maven pom.xml.")
            tool = BuildTool.MAVEN

        label = None if isinstance(database_type, DatabaseType) else database_type
        deps, dep_warnings = self.dependencies(tool, DatabaseType.parse(database_type), label)
        warnings.extend(dep_warnings)

        context = {
            "project_name": project_name,
            "base_package": base_package,
            "main_class": main_class,
            "versions": self.versions,
            "dependencies": deps,
            "gradle_lines": [
                (configuration, dep.coordinate)
                for dep in deps
                for configuration in GRADLE_CONFIGURATIONS[dep.scope]
            ],
        }
        content = self.renderer.render(_TEMPLATES[tool], context)
        return RenderResult(content=content, warnings=tuple(warnings))

    def assemble_for(self, spec: ProjectSpec, *, main_class: str | None = None) -> RenderResult:
        """Render the build manifest described by *spec*."""
        return self.assemble(
            spec.build_tool,
            spec.project_name,
            spec.base_package,
            spec.database_type,
            main_class=main_class,
        )

    def assemble_gradle_settings(self, project_name: str) -> RenderResult:
        """Render ``settings.gradle`` naming the root project."""
        content = self.renderer.render(
            "build/settings.gradle.j2", {"project_name": project_name}
        )
        return RenderResult(content=content)
