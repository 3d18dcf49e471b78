"""Directory listing used to find the properties files of a bundle."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Protocol

from manifest_locales.config.constants import LOGGER_NAME
from manifest_locales.exceptions import DirectoryListingError


logger = logging.getLogger(f"{LOGGER_NAME}.fs")


class DirectoryLister(Protocol):
    async def list(self, directory: str) -> list[str]:
        """
        Return the names of the files in ``directory``.

        Raises:
            DirectoryListingError: If the directory can't be listed
        """
        ...


class LocalDirectoryLister:
    """
    Lists directories of the local filesystem, relative to a root directory.

    Directory arguments are POSIX-style paths, "" or "." being the root itself.
    """

    def __init__(self, root: Path | str) -> None:
        self.root: Path = Path(root)

    def __repr__(self) -> str:
        return f"LocalDirectoryLister({str(self.root)!r})"

    def _resolve(self, directory: str) -> Path:
        """
        Raises:
            DirectoryListingError: If the directory lies outside of the root
        """
        path = self.root.joinpath(*(part for part in directory.split("/") if part))
        if not path.resolve().is_relative_to(self.root.resolve()):
            raise DirectoryListingError(directory, "outside of the root directory")
        return path

    @staticmethod
    def _list_files(path: Path) -> list[str]:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries if entry.is_file()]

    async def list(self, directory: str) -> list[str]:
        path = self._resolve(directory)
        try:
            filenames = await asyncio.to_thread(self._list_files, path)
        except FileNotFoundError as exc:
            raise DirectoryListingError(directory) from exc
        except NotADirectoryError as exc:
            raise DirectoryListingError(directory, "not a directory") from exc
        except PermissionError as exc:
            raise DirectoryListingError(directory, "permission denied") from exc
        logger.debug(f"Listed {len(filenames)} file(s) in {path}")
        return filenames
