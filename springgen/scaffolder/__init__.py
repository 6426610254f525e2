"""springgen scaffolder -- generates a three-layer Spring Boot project.

Takes a ``ProjectSpec`` plus a module name and renders the build manifest,
the module's Java sources and the application configuration file.

Quick usage::

    from springgen.models import ProjectSpec
    from springgen.scaffolder import ProjectGenerator

    spec = ProjectSpec(project_name="shop", base_package="com.example.shop")
    generator = ProjectGenerator()
    plan = generator.plan(spec, "order item")
    project_path = await generator.write(plan, "/tmp/output")
"""

from springgen.scaffolder.build_gen import BuildDescriptorAssembler
from springgen.scaffolder.config_gen import ConfigAssembler
from springgen.scaffolder.generator import ProjectGenerator
from springgen.scaffolder.sources_gen import JavaSourceGenerator
from springgen.scaffolder.templates import TemplateRenderer
from springgen.scaffolder.writer import ProjectWriter

__all__ = [
    "BuildDescriptorAssembler",
    "ConfigAssembler",
    "JavaSourceGenerator",
    "ProjectGenerator",
    "ProjectWriter",
    "TemplateRenderer",
]
