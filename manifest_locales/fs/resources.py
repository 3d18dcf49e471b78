"""Manifest files of a workspace, readable and replaceable as a whole."""

from __future__ import annotations

import asyncio
import logging
import posixpath
from pathlib import Path

from manifest_locales.config.constants import LOGGER_NAME


logger = logging.getLogger(f"{LOGGER_NAME}.fs")


class ManifestResource:
    """
    A file inside a workspace.

    ``path`` is relative to the workspace root and uses forward slashes.
    Content set through ``set_string`` is kept in memory until the workspace writes it.
    """

    def __init__(self, root: Path, path: str) -> None:
        self._root = root
        self.path: str = path
        self._content: str | None = None
        self.changed: bool = False

    def __repr__(self) -> str:
        return f"ManifestResource({self.path!r})"

    @property
    def directory(self) -> str:
        return posixpath.dirname(self.path)

    @property
    def file_path(self) -> Path:
        return self._root.joinpath(*self.path.split("/"))

    async def get_string(self) -> str:
        if self._content is None:
            self._content = await asyncio.to_thread(self.file_path.read_text, encoding="utf8")
        return self._content

    def set_string(self, content: str) -> None:
        self._content = content
        self.changed = True


class Workspace:
    def __init__(self, root: Path | str) -> None:
        self.root: Path = Path(root)

    def __repr__(self) -> str:
        return f"Workspace({str(self.root)!r})"

    def by_glob(self, pattern: str) -> list[ManifestResource]:
        resources = [
            ManifestResource(self.root, path.relative_to(self.root).as_posix())
            for path in self.root.glob(pattern)
            if path.is_file()
        ]
        resources.sort(key=lambda resource: resource.path)
        return resources

    async def write(self, resource: ManifestResource) -> None:
        content = await resource.get_string()
        await asyncio.to_thread(resource.file_path.write_text, content, encoding="utf8")
        resource.changed = False
        logger.debug(f"Wrote {resource.file_path}")
