"""Spring ``application.properties`` / ``application.yml`` generation.

Resolves the datasource settings (JDBC URL, credentials, Hibernate dialect)
from the database choices through per-``DatabaseType`` lookup tables and
renders them with the format's Jinja2 template.  Both formats carry the
same fields: URL, credentials, ``ddl-auto=update``, ``show-sql=true`` and
the dialect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import (
    ConfigFormat,
    DatabaseType,
    ProjectSpec,
    RenderResult,
    unknown_database_warning,
)
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Decision tables
# ---------------------------------------------------------------------------

H2_URL = "jdbc:h2:mem:testdb"
H2_CONSOLE_PATH = "/h2-console"
CREATE_DATABASE_PARAM = "createDatabaseIfNotExist=true"

# Server databases: URL pattern and the driver's fixed query parameters.
SERVER_URLS: dict[DatabaseType, tuple[str, tuple[str, ...]]] = {
    DatabaseType.MYSQL: (
        "jdbc:mysql://localhost:3306/{name}",
        ("useSSL=false", "serverTimezone=UTC"),
    ),
    DatabaseType.POSTGRESQL: ("jdbc:postgresql://localhost:5432/{name}", ()),
}

DEFAULT_USERNAMES: dict[DatabaseType, str] = {
    DatabaseType.H2: "sa",
    DatabaseType.MYSQL: "root",
    DatabaseType.POSTGRESQL: "postgres",
    DatabaseType.OTHER: "sa",
}

DIALECTS: dict[DatabaseType, str] = {
    DatabaseType.H2: "org.hibernate.dialect.H2Dialect",
    DatabaseType.MYSQL: "org.hibernate.dialect.MySQLDialect",
    DatabaseType.POSTGRESQL: "org.hibernate.dialect.PostgreSQLDialect",
}

_TEMPLATES: dict[ConfigFormat, str] = {
    ConfigFormat.PROPERTIES: "resources/application.properties.j2",
    ConfigFormat.YML: "resources/application.yml.j2",
}


@dataclass(frozen=True)
class DatasourceSettings:
    """Resolved values printed by the configuration templates."""

    url: str
    username: str
    password: str
    dialect: Optional[str]
    h2_console: bool


# ---------------------------------------------------------------------------
# Resolution helpers
# ---------------------------------------------------------------------------

def datasource_url(
    database_type: DatabaseType, database_name: str, create_if_not_exists: bool
) -> str:
    """Return the JDBC URL for *database_type*.

    H2 (and the ``OTHER`` fallback) always use the in-memory URL and ignore
    *database_name*.  The create-if-not-exists parameter is only honoured
    for server databases.
    """
    if database_type not in SERVER_URLS:
        return H2_URL

    pattern, params = SERVER_URLS[database_type]
    query = list(params)
    if create_if_not_exists:
        query.append(CREATE_DATABASE_PARAM)
    url = pattern.format(name=database_name)
    if query:
        url = f"{url}?{'&'.join(query)}"
    return url


def resolve_dialect(
    config_format: ConfigFormat, database_type: DatabaseType, explicit: str
) -> Optional[str]:
    """Pick the Hibernate dialect, or ``None`` when no dialect line is emitted.

    An explicit dialect always wins.  For unrecognised database types the
    properties format falls back to the H2 dialect while the YAML format
    omits the dialect entirely.
    """
    if explicit:
        return explicit
    if database_type in DIALECTS:
        return DIALECTS[database_type]
    if config_format is ConfigFormat.PROPERTIES:
        return DIALECTS[DatabaseType.H2]
    return None


def config_file_name(config_format: str | ConfigFormat) -> str:
    """``application.properties`` or ``application.yml``."""
    return f"application.{ConfigFormat.parse(config_format).value}"


# ---------------------------------------------------------------------------
# Assembler
# ---------------------------------------------------------------------------


class ConfigAssembler:
    """Builds the text of the Spring Boot configuration file."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def assemble(
        self,
        config_format: str | ConfigFormat,
        database_type: str | DatabaseType,
        database_name: str = "",
        dialect: str = "",
        create_if_not_exists: bool = False,
        username: str = "",
        password: str = "",
    ) -> RenderResult:
        """Render the configuration file for the given database choices.

        Args:
            config_format: ``"properties"`` or ``"yml"``.
            database_type: ``"h2"``, ``"mysql"``, ``"postgresql"``; any other
                value takes the H2 fallback branch with a warning.
            database_name: Database (schema) name, ignored for H2.
            dialect: Explicit Hibernate dialect; empty selects the default.
            create_if_not_exists: Append the create-database URL parameter
                (server databases only).
            username: Empty selects the database type's default user.
            password: Emitted verbatim; empty emits an empty value.

        Returns:
            The rendered text and any advisory warnings.

        Raises:
            UnsupportedConfigFormatError: If *config_format* is unknown.
        """
        fmt = ConfigFormat.parse(config_format)
        db_type = DatabaseType.parse(database_type)
        warnings: list[str] = []

        if db_type is DatabaseType.OTHER:
            label = None if isinstance(database_type, DatabaseType) else database_type
            warnings.append(unknown_database_warning(label))
        elif db_type in SERVER_URLS and not database_name:
            warnings.append(
                f"No database name given for {db_type.value}; the JDBC URL has an empty path."
            )

        settings = DatasourceSettings(
            url=datasource_url(db_type, database_name, create_if_not_exists),
            username=username or DEFAULT_USERNAMES[db_type],
            password=password,
            dialect=resolve_dialect(fmt, db_type, dialect),
            h2_console=db_type not in SERVER_URLS,
        )
        content = self.renderer.render(
            _TEMPLATES[fmt],
            {"datasource": settings, "h2_console_path": H2_CONSOLE_PATH},
        )
        return RenderResult(content=content, warnings=tuple(warnings))

    def assemble_for(self, spec: ProjectSpec) -> RenderResult:
        """Render the configuration file described by *spec*."""
        return self.assemble(
            spec.config_format,
            spec.database_type,
            spec.database_name,
            spec.database_dialect,
            spec.create_if_not_exists,
            spec.username,
            spec.password,
        )
