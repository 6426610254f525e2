"""Main scaffolding orchestrator.

Takes a ``ProjectSpec`` and a module name and produces the complete Spring
Boot project: build manifest, module sources (entry point, entity,
repository, service, controller, OpenAPI config) and the application
configuration file.

Planning is pure -- :meth:`ProjectGenerator.plan` returns the ordered
directories and artifacts plus advisory warnings.  Writing is delegated to
:class:`~springgen.scaffolder.writer.ProjectWriter`.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Callable, Optional

from ..config import Config
from ..models import Artifact, BuildTool, ProjectSpec, ScaffoldPlan
from ..naming import ModuleNameVariants, derive, validate_module_name
from .build_gen import MANIFEST_FILES, BuildDescriptorAssembler
from .config_gen import ConfigAssembler, config_file_name
from .sources_gen import (
    MODULE_SUBPACKAGES,
    SRC_MAIN_RESOURCES,
    JavaSourceGenerator,
    entry_point_class,
    java_source_root,
    module_source_dir,
)
from .templates import TemplateRenderer
from .writer import ProjectWriter


PROJECT_ROOT = PurePosixPath(".")


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectSpec`` and the module name, generates:
    - ``pom.xml`` or ``build.gradle`` (+ ``settings.gradle``) at the root
    - ``src/main/java/<base package>/<module>/`` with ``Application.java``
      and the ``config``, ``controller``, ``service``, ``repository`` and
      ``entity`` sub-packages
    - ``src/main/resources/application.<format>``
    """

    def __init__(
        self,
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()
        self.config_assembler = ConfigAssembler(self.renderer)
        self.build_assembler = BuildDescriptorAssembler(self.renderer, self.config.versions)
        self.sources = JavaSourceGenerator(self.renderer, self.config.api_server_url)

    # -- Public API --------------------------------------------------------

    def plan(
        self,
        spec: ProjectSpec,
        module: str | ModuleNameVariants,
    ) -> ScaffoldPlan:
        """Compute every directory and artifact for *spec* without touching disk.

        Args:
            spec: Project-level choices.
            module: Raw module name, or variants already derived from it.

        Raises:
            InvalidModuleNameError: If the module name is unusable.
            UnsupportedConfigFormatError: If the config format is unknown.
        """
        raw = module if isinstance(module, str) else module.pascal
        names = derive(module) if isinstance(module, str) else module
        validate_module_name(names, raw)

        warnings: list[str] = []
        artifacts: list[Artifact] = []

        # 1. Build manifest
        manifest = self.build_assembler.assemble_for(
            spec, main_class=entry_point_class(spec.base_package, names)
        )
        warnings.extend(manifest.warnings)
        artifacts.append(
            Artifact(
                relative_path=PurePosixPath(MANIFEST_FILES[spec.build_tool]),
                content=manifest.content,
            )
        )
        if spec.build_tool is BuildTool.GRADLE:
            settings = self.build_assembler.assemble_gradle_settings(spec.project_name)
            artifacts.append(
                Artifact(relative_path=PurePosixPath("settings.gradle"), content=settings.content)
            )

        # 2. Module sources
        artifacts.extend(self.sources.render_all(spec.base_package, names))

        # 3. Application configuration
        app_config = self.config_assembler.assemble_for(spec)
        warnings.extend(app_config.warnings)
        artifacts.append(
            Artifact(
                relative_path=SRC_MAIN_RESOURCES / config_file_name(spec.config_format),
                content=app_config.content,
            )
        )

        return ScaffoldPlan(
            project_name=spec.project_name,
            directories=self.directories(spec, names),
            artifacts=tuple(artifacts),
            warnings=tuple(_dedupe(warnings)),
        )

    def directories(self, spec: ProjectSpec, names: ModuleNameVariants) -> tuple[PurePosixPath, ...]:
        """Directories in creation order, relative to the project root.

        Project root (which also holds the build manifest), Java source
        root, module package and its sub-packages, then resources.
        """
        module_dir = module_source_dir(spec.base_package, names)
        return (
            PROJECT_ROOT,
            java_source_root(spec.base_package),
            module_dir,
            *(module_dir / sub for sub in MODULE_SUBPACKAGES),
            SRC_MAIN_RESOURCES,
        )

    async def write(
        self,
        plan: ScaffoldPlan,
        output_dir: str | Path | None = None,
        *,
        on_write: Optional[Callable[[Path], None]] = None,
    ) -> Path:
        """Write *plan* below ``<output_dir>/<project name>``.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldIOError: On the first failed directory or file write.
        """
        base = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = base / plan.project_name
        writer = ProjectWriter(overwrite=self.config.overwrite, on_write=on_write)
        await writer.write(plan, project_root)
        return project_root

    async def generate(
        self,
        spec: ProjectSpec,
        module: str | ModuleNameVariants,
        output_dir: str | Path | None = None,
    ) -> Path:
        """Plan and write the project in one step.

        Returns:
            Path to the generated project root.
        """
        plan = self.plan(spec, module)
        return await self.write(plan, output_dir)


def _dedupe(items: list[str]) -> list[str]:
    """Drop repeated warnings, keeping first-seen order."""
    return list(dict.fromkeys(items))
