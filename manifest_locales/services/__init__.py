"""Manifest locale resolution services."""

from manifest_locales.services.bundle_locator import locate_bundles
from manifest_locales.services.eligibility import filter_autofill_bundles, is_autofill_required
from manifest_locales.services.fallback_validator import FallbackCheck, check_fallback_locale
from manifest_locales.services.locale_discovery import (
    BundleLocation,
    LocaleDiscovery,
    bundle_location,
    extract_locale,
    locales_from_filenames,
)
from manifest_locales.services.transformer import ManifestTransformer


__all__ = [
    "locate_bundles",
    "is_autofill_required",
    "filter_autofill_bundles",
    "BundleLocation",
    "LocaleDiscovery",
    "bundle_location",
    "extract_locale",
    "locales_from_filenames",
    "FallbackCheck",
    "check_fallback_locale",
    "ManifestTransformer",
]
