"""Shared pytest fixtures for the springgen test suite.

Provides reusable fixtures for:
- Derived module names
- Project specs for each build tool / database combination
- A generator configured to write below ``tmp_path``
"""

from __future__ import annotations

from pathlib import Path

import pytest

from springgen.config import Config
from springgen.models import BuildTool, ConfigFormat, DatabaseType, ProjectSpec
from springgen.naming import ModuleNameVariants, derive
from springgen.scaffolder import ProjectGenerator, TemplateRenderer


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

@pytest.fixture
def order_item() -> ModuleNameVariants:
    """Variants for the two-word module name ``order item``."""
    return derive("order item")


@pytest.fixture
def product() -> ModuleNameVariants:
    return derive("Product")


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------

@pytest.fixture
def h2_spec() -> ProjectSpec:
    """Maven + H2 + properties: every default."""
    return ProjectSpec(project_name="shop", base_package="com.example.shop")


@pytest.fixture
def gradle_postgres_spec() -> ProjectSpec:
    return ProjectSpec(
        project_name="inventory",
        base_package="com.acme.inventory",
        build_tool=BuildTool.GRADLE,
        config_format=ConfigFormat.YML,
        database_type=DatabaseType.POSTGRESQL,
        database_name="inventory",
        username="inv",
        password="s3cret",
    )


@pytest.fixture
def mysql_spec() -> ProjectSpec:
    return ProjectSpec(
        project_name="orders",
        base_package="com.example.orders",
        database_type=DatabaseType.MYSQL,
        database_name="orders",
        create_if_not_exists=True,
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def generator(tmp_path: Path) -> ProjectGenerator:
    """A ProjectGenerator writing below ``tmp_path``."""
    return ProjectGenerator(Config(output_dir=tmp_path))
