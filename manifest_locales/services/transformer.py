"""
Manifest transformer: fills in supportedLocales of every eligible text bundle.

Each eligible bundle is resolved in its own task (discovery and fallback check), and
the results are written directly into the bundle's configuration object. The manifest
is serialized once, after all bundles are settled, and only if any bundle was filled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from manifest_locales.config.constants import LOGGER_NAME, MIN_DESCRIPTOR_VERSION
from manifest_locales.config.settings import TransformOptions
from manifest_locales.exceptions import DirectoryListingError
from manifest_locales.models.manifest import ManifestDocument
from manifest_locales.services.bundle_locator import locate_bundles
from manifest_locales.services.eligibility import filter_autofill_bundles
from manifest_locales.services.fallback_validator import check_fallback_locale
from manifest_locales.services.locale_discovery import LocaleDiscovery
from manifest_locales.utils.async_helpers import settle
from manifest_locales.utils.diagnostics import Diagnostics, LoggerDiagnostics
from manifest_locales.utils.json_utils import json_dumps_manifest


if TYPE_CHECKING:
    from manifest_locales.fs.listing import DirectoryLister
    from manifest_locales.fs.resources import ManifestResource
    from manifest_locales.models.bundle import BundleReference


logger = logging.getLogger(f"{LOGGER_NAME}.transformer")

_MIN_VERSION_STR = ".".join(map(str, MIN_DESCRIPTOR_VERSION))


class ManifestTransformer:
    def __init__(
        self,
        lister: DirectoryLister,
        options: TransformOptions | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self._lister = lister
        self.options: TransformOptions = options or TransformOptions()
        self._diagnostics: Diagnostics = diagnostics or LoggerDiagnostics(logger)

    def _is_supported_version(self, manifest: ManifestDocument) -> bool:
        if manifest.raw_version is None:
            self._diagnostics.verbose(
                f"{manifest.path}: version is not defined. No supportedLocales are generated"
            )
            return False
        version = manifest.version
        if version is None:
            self._diagnostics.verbose(
                f"{manifest.path}: version '{manifest.raw_version}' is not a valid version. "
                "No supportedLocales are generated"
            )
            return False
        if version < MIN_DESCRIPTOR_VERSION:
            self._diagnostics.verbose(
                f"{manifest.path}: version is lower than {_MIN_VERSION_STR} "
                "so no supportedLocales can be generated"
            )
            return False
        return True

    async def _resolve_bundle(
        self, discovery: LocaleDiscovery, bundle: BundleReference, manifest: ManifestDocument
    ) -> bool:
        """
        Discover and validate the locales of one bundle, then write them onto it.

        Returns whether supportedLocales was written.
        """
        try:
            locales = await discovery.discover(bundle)
        except DirectoryListingError as exc:
            self._diagnostics.error(
                f"{manifest.path}: Unable to generate supported locales for bundle "
                f"'{bundle.label}': {exc}"
            )
            return False
        check = check_fallback_locale(
            locales,
            bundle,
            self._diagnostics,
            default_fallback_locale=self.options.default_fallback_locale,
            source=manifest.path,
        )
        if not locales:
            # an empty list would disable the bundle at runtime
            self._diagnostics.verbose(
                f"{manifest.path}: No properties files found for bundle '{bundle.label}'. "
                "No supportedLocales are generated"
            )
            return False
        if not check.writable:
            return False
        bundle.supported_locales = locales
        return True

    async def transform_text(
        self,
        text: str,
        *,
        path: str = "manifest.json",
        base_dir: str = "",
        resources_root: str = "",
    ) -> str | None:
        """
        Return the manifest text with supportedLocales filled in, or None if nothing changed.

        ``base_dir`` is the manifest's directory (for bundleUrl paths), ``resources_root``
        the directory bundleName paths start from.

        Raises:
            ManifestFormatError: If the text isn't a JSON object
        """
        manifest = ManifestDocument(text, path)
        if not self._is_supported_version(manifest):
            return None

        bundles = filter_autofill_bundles(locate_bundles(manifest), manifest.app_id)
        if not bundles:
            return None

        discovery = LocaleDiscovery(self._lister, base_dir=base_dir, resources_root=resources_root)
        outcomes = await settle(
            self._resolve_bundle(discovery, bundle, manifest) for bundle in bundles
        )
        for outcome in outcomes:
            if isinstance(outcome, Exception):
                raise outcome
        if not any(outcomes):
            return None
        return json_dumps_manifest(
            manifest.data, pretty_print=self.options.pretty_print, indent=self.options.indent
        )

    async def transform_resource(
        self, resource: ManifestResource, *, resources_root: str = ""
    ) -> ManifestResource | None:
        """
        Transform a manifest resource in place, returning it if its content was replaced.
        """
        content = await resource.get_string()
        transformed = await self.transform_text(
            content,
            path=resource.path,
            base_dir=resource.directory,
            resources_root=resources_root,
        )
        if transformed is None:
            return None
        resource.set_string(transformed)
        return resource

    async def transform_resources(
        self, resources: list[ManifestResource], *, resources_root: str = ""
    ) -> list[ManifestResource | None | Exception]:
        """
        Transform all resources concurrently.

        Each slot holds the changed resource, None for an unchanged one, or the exception
        that made its manifest fail.
        """
        return await settle(
            self.transform_resource(resource, resources_root=resources_root)
            for resource in resources
        )
