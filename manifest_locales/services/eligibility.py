from __future__ import annotations

from manifest_locales.models.bundle import BundleReference


def is_autofill_required(bundle: BundleReference, app_id: str | None) -> bool:
    """
    Check whether a bundle's supportedLocales should be generated.

    Bundles outside of the project, bundles of other namespaces (reuse libraries)
    and bundles with supportedLocales already set (``[""]`` included) are left alone.
    """
    bundle_url = bundle.bundle_url
    bundle_name = bundle.bundle_name
    if bundle_url is None and bundle_name is None:
        # nothing to scan
        return False
    if bundle_url is not None and bundle_url.startswith(("..", "/")):
        return False
    if bundle_name is not None and (app_id is None or not bundle_name.startswith(app_id)):
        return False
    if bundle.has_supported_locales:
        return False
    return True


def filter_autofill_bundles(
    bundles: list[BundleReference], app_id: str | None
) -> list[BundleReference]:
    return [bundle for bundle in bundles if is_autofill_required(bundle, app_id)]
