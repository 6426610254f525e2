"""Java source generation for one module.

One method per artifact kind (entry point, entity, repository, service,
controller, OpenAPI config).  Each takes the base package and the module's
``ModuleNameVariants`` and returns an :class:`Artifact`; no method derives
a type name itself -- every cross-file reference goes through the
variants' properties, so the controller's service type is byte-for-byte the
type the service file defines.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from pathlib import PurePosixPath
from typing import Any

from ..naming import ModuleNameVariants
from ..models import Artifact
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Source layout
# ---------------------------------------------------------------------------

SRC_MAIN_JAVA = PurePosixPath("src/main/java")
SRC_MAIN_RESOURCES = PurePosixPath("src/main/resources")

# Sub-packages of a module, in directory creation order.
MODULE_SUBPACKAGES: tuple[str, ...] = ("config", "controller", "service", "repository", "entity")

APPLICATION_TYPE = "Application"
OPENAPI_TYPE = "OpenApiConfig"


def java_source_root(base_package: str) -> PurePosixPath:
    """``src/main/java/com/example/app`` for ``com.example.app``."""
    return SRC_MAIN_JAVA.joinpath(*base_package.split("."))


def module_source_dir(base_package: str, names: ModuleNameVariants) -> PurePosixPath:
    return java_source_root(base_package) / names.camel


def entry_point_class(base_package: str, names: ModuleNameVariants) -> str:
    """Fully-qualified name of the generated ``@SpringBootApplication`` class."""
    return f"{names.module_package(base_package)}.{APPLICATION_TYPE}"


# ---------------------------------------------------------------------------
# REST surface of the generated controller
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Endpoint:
    """One controller handler: a single existence check (optional) and a
    terminal response."""

    action: str
    method: str
    path: str
    success: HTTPStatus
    checks_existence: bool


REST_ENDPOINTS: tuple[Endpoint, ...] = (
    Endpoint("list", "GET", "", HTTPStatus.OK, False),
    Endpoint("get", "GET", "/{id}", HTTPStatus.OK, True),
    Endpoint("create", "POST", "", HTTPStatus.CREATED, False),
    Endpoint("update", "PUT", "/{id}", HTTPStatus.OK, True),
    Endpoint("delete", "DELETE", "/{id}", HTTPStatus.NO_CONTENT, True),
)

MISSING_STATUS = HTTPStatus.NOT_FOUND

# Entity fields copied by the update handler; nothing else is merged.
UPDATE_FIELDS: tuple[str, ...] = ("name", "description")


def controller_base_path(names: ModuleNameVariants) -> str:
    return f"/api/{names.plural_camel}"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class JavaSourceGenerator:
    """Renders the Java sources of one module."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        api_server_url: str = "http://localhost:8080",
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.api_server_url = api_server_url

    # -- Per-artifact renderers --------------------------------------------

    def render_application(self, base_package: str, names: ModuleNameVariants) -> Artifact:
        return self._render(
            "java/Application.java.j2",
            module_source_dir(base_package, names) / f"{APPLICATION_TYPE}.java",
            base_package,
            names,
            application_type=APPLICATION_TYPE,
        )

    def render_entity(self, base_package: str, names: ModuleNameVariants) -> Artifact:
        return self._render(
            "java/Entity.java.j2",
            module_source_dir(base_package, names) / "entity" / f"{names.entity_type}.java",
            base_package,
            names,
        )

    def render_repository(self, base_package: str, names: ModuleNameVariants) -> Artifact:
        return self._render(
            "java/Repository.java.j2",
            module_source_dir(base_package, names) / "repository" / f"{names.repository_type}.java",
            base_package,
            names,
        )

    def render_service(self, base_package: str, names: ModuleNameVariants) -> Artifact:
        return self._render(
            "java/Service.java.j2",
            module_source_dir(base_package, names) / "service" / f"{names.service_type}.java",
            base_package,
            names,
        )

    def render_controller(self, base_package: str, names: ModuleNameVariants) -> Artifact:
        status = {endpoint.action: endpoint.success.name for endpoint in REST_ENDPOINTS}
        status["missing"] = MISSING_STATUS.name
        return self._render(
            "java/Controller.java.j2",
            module_source_dir(base_package, names) / "controller" / f"{names.controller_type}.java",
            base_package,
            names,
            base_path=controller_base_path(names),
            status=status,
            update_fields=UPDATE_FIELDS,
        )

    def render_openapi_config(self, base_package: str, names: ModuleNameVariants) -> Artifact:
        return self._render(
            "java/OpenApiConfig.java.j2",
            module_source_dir(base_package, names) / "config" / f"{OPENAPI_TYPE}.java",
            base_package,
            names,
            openapi_type=OPENAPI_TYPE,
            server_url=self.api_server_url,
        )

    def render_all(self, base_package: str, names: ModuleNameVariants) -> list[Artifact]:
        """Render every module source, referenced types before their users."""
        return [
            self.render_application(base_package, names),
            self.render_entity(base_package, names),
            self.render_repository(base_package, names),
            self.render_service(base_package, names),
            self.render_controller(base_package, names),
            self.render_openapi_config(base_package, names),
        ]

    # -- Internal ----------------------------------------------------------

    def _render(
        self,
        template_path: str,
        relative_path: PurePosixPath,
        base_package: str,
        names: ModuleNameVariants,
        **extra: Any,
    ) -> Artifact:
        context: dict[str, Any] = {
            "base_package": base_package,
            "module_package": names.module_package(base_package),
            "names": names,
            **extra,
        }
        content = self.renderer.render(template_path, context)
        return Artifact(relative_path=relative_path, content=content)
