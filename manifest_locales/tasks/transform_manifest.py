"""
Task transforming all manifest.json files of a workspace.

Manifests are looked up below the namespace directory, transformed concurrently,
and only the ones that changed are written back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from manifest_locales.config.constants import LOGGER_NAME, MANIFEST_FILENAME, VERBOSE
from manifest_locales.config.settings import TransformOptions
from manifest_locales.fs.listing import DirectoryLister, LocalDirectoryLister
from manifest_locales.fs.resources import Workspace
from manifest_locales.services.transformer import ManifestTransformer
from manifest_locales.utils.async_helpers import format_traceback
from manifest_locales.utils.diagnostics import Diagnostics


logger = logging.getLogger(f"{LOGGER_NAME}.task")


@dataclass
class TransformReport:
    changed: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def namespace_pattern(namespace: str) -> str:
    """Transforms "sap.ui.demo" (or "sap/ui/demo") into "sap/ui/demo/**/manifest.json"."""
    namespace_path = namespace.replace(".", "/").strip("/")
    if not namespace_path:
        return f"**/{MANIFEST_FILENAME}"
    return f"{namespace_path}/**/{MANIFEST_FILENAME}"


async def transform_manifest(
    workspace: Workspace,
    options: TransformOptions | None = None,
    *,
    namespace: str = "",
    lister: DirectoryLister | None = None,
    diagnostics: Diagnostics | None = None,
) -> TransformReport:
    """
    Fill in supportedLocales of every manifest.json below ``namespace`` in the workspace.

    Bundle names are resolved from the workspace root, bundle URLs from each manifest's
    own directory. A manifest that fails doesn't stop the others.
    """
    if lister is None:
        lister = LocalDirectoryLister(workspace.root)
    transformer = ManifestTransformer(lister, options, diagnostics)
    resources = workspace.by_glob(namespace_pattern(namespace))
    logger.debug(f"Found {len(resources)} manifest(s) in {workspace.root}")

    report = TransformReport()
    outcomes = await transformer.transform_resources(resources)
    for resource, outcome in zip(resources, outcomes):
        if isinstance(outcome, Exception):
            logger.error(f"Failed to transform {resource.path}: {outcome}")
            logger.debug(format_traceback(outcome))
            report.failed.append(resource.path)
        elif outcome is None:
            logger.log(VERBOSE, f"No resource changed: {resource.path}")
            report.unchanged.append(resource.path)
        else:
            logger.log(VERBOSE, f"Resource transformed: {resource.path}")
            await workspace.write(outcome)
            report.changed.append(resource.path)
    return report
