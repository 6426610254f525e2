"""Filesystem writer for scaffold plans.

The only component that touches the disk.  Directories are created in plan
order before any file is written; the first failure raises
:class:`ScaffoldIOError` and nothing after it is attempted.  Files written
before the failure are left in place.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, Optional

from ..errors import ScaffoldIOError
from ..models import ScaffoldPlan


class ProjectWriter:
    """Writes a :class:`ScaffoldPlan` below a project root directory.

    Args:
        overwrite: Replace files that already exist instead of failing.
        on_write: Called with each file path after it has been written.
    """

    def __init__(
        self,
        overwrite: bool = False,
        on_write: Optional[Callable[[Path], None]] = None,
    ) -> None:
        self.overwrite = overwrite
        self.on_write = on_write

    async def write(self, plan: ScaffoldPlan, project_root: str | Path) -> list[Path]:
        """Create the plan's directories, then write its artifacts.

        Returns:
            The written file paths, in write order.

        Raises:
            ScaffoldIOError: On the first directory or file that cannot be
                written.
        """
        root = Path(project_root)
        for directory in plan.directories:
            await asyncio.to_thread(_make_dir, root / directory)

        written: list[Path] = []
        for artifact in plan.artifacts:
            path = root / artifact.relative_path
            await asyncio.to_thread(_write_file, path, artifact.content, self.overwrite)
            written.append(path)
            if self.on_write is not None:
                self.on_write(path)
        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldIOError(path, f"cannot create directory ({exc.strerror or exc})") from exc


def _write_file(path: Path, content: str, overwrite: bool) -> None:
    """Synchronous helper: write *content*, refusing to clobber unless allowed."""
    if path.exists() and not overwrite:
        raise ScaffoldIOError(path, "already exists (pass --force to overwrite)")
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ScaffoldIOError(path, f"cannot write file ({exc.strerror or exc})") from exc
