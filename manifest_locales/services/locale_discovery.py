"""Locale discovery: derives the locales of a bundle from the properties files next to it."""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING, NamedTuple

from manifest_locales.config.constants import LOGGER_NAME, PROPERTIES_EXT


if TYPE_CHECKING:
    from manifest_locales.fs.listing import DirectoryLister
    from manifest_locales.models.bundle import BundleReference


logger = logging.getLogger(f"{LOGGER_NAME}.transformer")


class BundleLocation(NamedTuple):
    directory: str  # relative, POSIX-style, "" for the current directory
    prefix: str  # file name stem shared by all locale variants


def bundle_location(bundle: BundleReference) -> BundleLocation | None:
    """
    Directory and file prefix of a bundle's properties files.

    ``bundleName`` wins over ``bundleUrl`` when both are set. None if neither is.
    """
    bundle_name = bundle.bundle_name
    bundle_url = bundle.bundle_url
    if bundle_name is not None:
        stem = bundle_name.replace(".", "/")
    elif bundle_url is not None:
        stem = bundle_url
        if stem.endswith(PROPERTIES_EXT):
            stem = stem[: -len(PROPERTIES_EXT)]
    else:
        return None
    directory, prefix = posixpath.split(stem)
    return BundleLocation(directory, prefix)


def extract_locale(filename: str, prefix: str) -> str | None:
    """
    Transforms "i18n_en_US.properties" into "en_US" and "i18n.properties" into "".

    Returns None for files that aren't variants of the ``prefix`` bundle.
    """
    if not filename.endswith(PROPERTIES_EXT):
        return None
    stem = filename[: -len(PROPERTIES_EXT)]
    if stem == prefix:
        return ""
    if stem.startswith(f"{prefix}_"):
        return stem[len(prefix) + 1 :]
    return None


def locales_from_filenames(filenames: list[str], prefix: str) -> list[str]:
    """Sorted, unique locales of the ``prefix`` bundle found among ``filenames``."""
    locales = {
        locale
        for filename in filenames
        if (locale := extract_locale(filename, prefix)) is not None
    }
    return sorted(locales)


class LocaleDiscovery:
    """
    Lists the directory of a bundle and derives its available locales.

    ``bundleUrl`` directories are resolved against ``base_dir`` (the manifest's own
    directory), ``bundleName`` directories against ``resources_root``.
    """

    def __init__(
        self, lister: DirectoryLister, *, base_dir: str = "", resources_root: str = ""
    ) -> None:
        self._lister = lister
        self._base_dir = base_dir
        self._resources_root = resources_root

    def resolve_directory(self, bundle: BundleReference, location: BundleLocation) -> str:
        base = self._resources_root if bundle.bundle_name is not None else self._base_dir
        if not base:
            return location.directory
        if not location.directory:
            return base
        return posixpath.join(base, location.directory)

    async def discover(self, bundle: BundleReference) -> list[str]:
        """
        Raises:
            DirectoryListingError: If the bundle's directory can't be listed
        """
        location = bundle_location(bundle)
        if location is None:
            return []
        directory = self.resolve_directory(bundle, location)
        filenames = await self._lister.list(directory)
        locales = locales_from_filenames(list(filenames), location.prefix)
        logger.debug(
            f"{bundle.label}: found locales {locales} for '{location.prefix}' in '{directory}'"
        )
        return locales
