"""Command line interface for springgen.

Every choice can be given as an option; whatever is missing is asked for
interactively (unless ``--no-input`` is set).
"""

from __future__ import annotations

import argparse
import asyncio
import time
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError
from rich.prompt import Confirm, Prompt

from . import __version__
from .config import Config
from .errors import ScaffoldError
from .models import BuildTool, ConfigFormat, DatabaseType, ProjectSpec
from .scaffolder import ProjectGenerator
from .utils import (
    console,
    format_duration,
    print_error,
    print_generated,
    print_success,
    print_summary_table,
    print_warning,
)


_RUN_HINTS: dict[BuildTool, str] = {
    BuildTool.MAVEN: "mvn spring-boot:run",
    BuildTool.GRADLE: "gradle bootRun",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="springgen",
        description="Generate a three-layer Spring Boot project (controller, service, repository, entity)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  springgen\n"
            "  springgen --project-name shop --base-package com.example.shop --module 'order item'\n"
            "  springgen -n shop -p com.example.shop -m product --build-tool gradle \\\n"
            "            --database postgresql --database-name shop --config-format yml\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-n", "--project-name", help="Project directory / artifact name (e.g. my-app)")
    parser.add_argument("-p", "--base-package", help="Base Java package (e.g. com.example.myapp)")
    parser.add_argument("-m", "--module", help="Module name (e.g. Product, 'order item')")
    parser.add_argument(
        "--build-tool",
        help=f"Build tool: {', '.join(t.value for t in BuildTool)} (default: maven)",
    )
    parser.add_argument(
        "--config-format",
        help=f"Configuration format: {', '.join(f.value for f in ConfigFormat)} (default: properties)",
    )
    parser.add_argument("--database", help="Database type: h2, mysql, postgresql (default: h2)")
    parser.add_argument("--database-name", help="Database name (ignored for h2)")
    parser.add_argument("--dialect", help="Hibernate dialect override")
    parser.add_argument(
        "--create-db",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Append createDatabaseIfNotExist to the JDBC URL",
    )
    parser.add_argument("--username", help="Database username (default depends on database)")
    parser.add_argument("--password", help="Database password")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Parent directory for the project (default: SPRINGGEN_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; use defaults for optional choices",
    )
    return parser


# ---------------------------------------------------------------------------
# Choice collection
# ---------------------------------------------------------------------------


def _ask(value: Optional[str], prompt: str, *, interactive: bool, default: str = "") -> str:
    if value is not None:
        return value
    if not interactive:
        return default
    return Prompt.ask(prompt, default=default or None, show_default=bool(default)) or ""


def collect_choices(args: argparse.Namespace) -> dict[str, Any]:
    """Merge command line options with interactive answers."""
    interactive = not args.no_input
    choices: dict[str, Any] = {
        "project_name": _ask(args.project_name, "Enter Project Name (e.g., my-app)", interactive=interactive),
        "base_package": _ask(
            args.base_package, "Enter Base Package (e.g., com.example.myapp)", interactive=interactive
        ),
        "module": _ask(args.module, "Enter Module Name (e.g., Product, User)", interactive=interactive),
        "build_tool": _ask(
            args.build_tool, "Build tool (maven/gradle)", interactive=interactive, default="maven"
        ),
        "config_format": _ask(
            args.config_format,
            "Configuration format (properties/yml)",
            interactive=interactive,
            default="properties",
        ),
        "database_type": _ask(
            args.database, "Database type (h2/mysql/postgresql)", interactive=interactive, default="h2"
        ),
    }

    needs_server_details = DatabaseType.parse(choices["database_type"]) is not DatabaseType.H2
    if needs_server_details:
        choices["database_name"] = _ask(args.database_name, "Database name", interactive=interactive)
        if args.create_db is None and interactive:
            choices["create_if_not_exists"] = Confirm.ask(
                "Create the database if it does not exist?", default=False
            )
        else:
            choices["create_if_not_exists"] = bool(args.create_db)
        choices["username"] = _ask(
            args.username, "Database username (blank for default)", interactive=interactive
        )
        if args.password is not None:
            choices["password"] = args.password
        elif interactive:
            choices["password"] = Prompt.ask(
                "Database password (blank for none)", password=True, default="", show_default=False
            )
        else:
            choices["password"] = ""
        choices["database_dialect"] = _ask(
            args.dialect, "Hibernate dialect (blank for default)", interactive=interactive
        )
    else:
        choices.update(
            database_name=args.database_name or "",
            create_if_not_exists=bool(args.create_db),
            username=args.username or "",
            password=args.password or "",
            database_dialect=args.dialect or "",
        )
    return choices


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _report_validation_error(exc: ValidationError) -> None:
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "input"
        print_error(f"Invalid {field}: {err.get('msg', 'invalid value')}")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``springgen`` / ``python -m springgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.output is not None:
        config.output_dir = args.output
    if args.force:
        config.overwrite = True

    console.print("[bold]Spring Boot Three-Layer Architecture Generator[/bold]")
    choices = collect_choices(args)
    module_name = choices.pop("module")
    started = time.monotonic()

    try:
        spec, warnings = ProjectSpec.from_choices(**choices)
        generator = ProjectGenerator(config)
        plan = generator.plan(spec, module_name)
        for message in [*warnings, *plan.warnings]:
            print_warning(message)

        console.print(f"\nGenerating project structure for module: [bold]{module_name}[/bold]...")
        target = config.output_dir / spec.project_name
        project_root = asyncio.run(
            generator.write(plan, on_write=lambda path: print_generated(path, target))
        )
    except ValidationError as exc:
        _report_validation_error(exc)
        return 1
    except ScaffoldError as exc:
        print_error(f"Error generating project: {exc}")
        return 1

    console.print()
    print_summary_table(
        {
            "Project": spec.project_name,
            "Base package": spec.base_package,
            "Build tool": spec.build_tool.value,
            "Database": spec.database_type.value,
            "Config file": f"application.{spec.config_format.value}",
            "Files": str(len(plan.artifacts)),
            "Elapsed": format_duration(time.monotonic() - started),
        },
        title="Generated project",
    )
    print_success(f"Project '{spec.project_name}' generated successfully!")
    console.print(f"Navigate to the project directory: cd {project_root}")
    console.print(f"Then build and run it with: {_RUN_HINTS[spec.build_tool]}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
