"""
Bundle locator: finds every text bundle configuration of a manifest.

Covers the sap.app bundle, resource models of applications, the library bundle of
libraries, and the terminology and enhancement bundles nested in any of them.
String and boolean ``i18n`` shorthands are rewritten into their object form in the
live tree so the returned references can be mutated in place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from manifest_locales.config.constants import (
    DEFAULT_APP_BUNDLE_URL,
    DEFAULT_LIBRARY_BUNDLE_URL,
    LOGGER_NAME,
    RESOURCE_MODEL_TYPE,
    BundleKind,
)
from manifest_locales.models.bundle import (
    BooleanForm,
    BundleReference,
    ObjectForm,
    StringForm,
    classify_bundle_config,
)


if TYPE_CHECKING:
    from manifest_locales.config.constants import JsonType
    from manifest_locales.models.manifest import ManifestDocument


logger = logging.getLogger(f"{LOGGER_NAME}.transformer")


def _sap_app_bundle(manifest: ManifestDocument) -> BundleReference | None:
    sap_app = manifest.sap_app
    if sap_app is None:
        return None
    config = sap_app.get("i18n")
    if config is None:
        if manifest.is_library:
            # libraries load messagebundle.properties when sap.app/i18n is unset
            config = DEFAULT_LIBRARY_BUNDLE_URL
        elif manifest.has_templates:
            # the runtime requests i18n/i18n.properties for {{placeholders}} when sap.app/i18n is unset
            config = DEFAULT_APP_BUNDLE_URL
    form = classify_bundle_config(config)
    if isinstance(form, StringForm):
        node: JsonType = {"bundleUrl": form.bundle_url}
        sap_app["i18n"] = node
    elif isinstance(form, ObjectForm):
        node = form.config
    else:
        return None
    return BundleReference(node, BundleKind.APP, "sap.app/i18n")


def _sap_ui5_model_bundles(manifest: ManifestDocument) -> list[BundleReference]:
    models = (manifest.sap_ui5 or {}).get("models")
    if not isinstance(models, dict):
        return []
    bundles = []
    for name, model in models.items():
        if not isinstance(model, dict) or model.get("type") != RESOURCE_MODEL_TYPE:
            continue
        settings = model.get("settings")
        if isinstance(settings, dict):
            bundles.append(
                BundleReference(settings, BundleKind.MODEL, f"sap.ui5/models/{name}/settings")
            )
    return bundles


def _sap_ui5_library_bundle(manifest: ManifestDocument) -> BundleReference | None:
    library = (manifest.sap_ui5 or {}).get("library")
    if not isinstance(library, dict):
        return None
    form = classify_bundle_config(library.get("i18n"))
    if isinstance(form, BooleanForm):
        if not form.enabled:
            return None
        node: JsonType = {"bundleUrl": DEFAULT_LIBRARY_BUNDLE_URL}
        library["i18n"] = node
    elif isinstance(form, StringForm):
        node = {"bundleUrl": form.bundle_url}
        library["i18n"] = node
    elif isinstance(form, ObjectForm):
        node = form.config
    else:
        return None
    return BundleReference(node, BundleKind.LIBRARY, "sap.ui5/library/i18n")


def _nested_bundles(bundle: BundleReference) -> list[BundleReference]:
    """
    Terminologies and enhanceWith entries of a bundle, plus the enhancements' terminologies.
    """
    nested: list[BundleReference] = []
    for name, config in bundle.terminologies():
        nested.append(
            BundleReference(config, BundleKind.TERMINOLOGY, f"{bundle.label}/terminologies/{name}")
        )
    for index, config in enumerate(bundle.enhancements()):
        enhancement = BundleReference(
            config, BundleKind.ENHANCEMENT, f"{bundle.label}/enhanceWith/{index}"
        )
        nested.append(enhancement)
        for name, term_config in enhancement.terminologies():
            nested.append(
                BundleReference(
                    term_config,
                    BundleKind.TERMINOLOGY,
                    f"{enhancement.label}/terminologies/{name}",
                )
            )
    return nested


def locate_bundles(manifest: ManifestDocument) -> list[BundleReference]:
    """
    Collect all bundle references of a manifest, nested ones included.

    Every bundle configuration object appears at most once, regardless of eligibility.
    """
    top_level: list[BundleReference] = []
    if (app_bundle := _sap_app_bundle(manifest)) is not None:
        top_level.append(app_bundle)
    if manifest.is_library:
        if (library_bundle := _sap_ui5_library_bundle(manifest)) is not None:
            top_level.append(library_bundle)
    else:
        top_level.extend(_sap_ui5_model_bundles(manifest))

    bundles: list[BundleReference] = []
    seen: set[int] = set()
    for bundle in top_level:
        for candidate in (bundle, *_nested_bundles(bundle)):
            if id(candidate.node) in seen:
                continue
            seen.add(id(candidate.node))
            bundles.append(candidate)
    logger.debug(f"{manifest.path}: located {len(bundles)} bundle(s)")
    return bundles
