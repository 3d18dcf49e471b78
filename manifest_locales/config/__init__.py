"""Configuration package for manifest locale resolution."""

from __future__ import annotations

# Re-export all public symbols for convenience
from .constants import (
    DEFAULT_APP_BUNDLE_URL,
    DEFAULT_FALLBACK_LOCALE,
    DEFAULT_INDENT,
    DEFAULT_LIBRARY_BUNDLE_URL,
    LOGGER_NAME,
    LOGGING_LEVELS,
    MANIFEST_FILENAME,
    MIN_DESCRIPTOR_VERSION,
    OUTPUT_FORMATTER,
    PROPERTIES_EXT,
    RESOURCE_MODEL_TYPE,
    SAP_APP,
    SAP_UI5,
    VERBOSE,
    AppType,
    BundleKind,
    JsonType,
)


__all__ = [
    "VERBOSE",
    "LOGGING_LEVELS",
    "OUTPUT_FORMATTER",
    "LOGGER_NAME",
    "JsonType",
    "MIN_DESCRIPTOR_VERSION",
    "SAP_APP",
    "SAP_UI5",
    "RESOURCE_MODEL_TYPE",
    "PROPERTIES_EXT",
    "MANIFEST_FILENAME",
    "DEFAULT_APP_BUNDLE_URL",
    "DEFAULT_LIBRARY_BUNDLE_URL",
    "DEFAULT_FALLBACK_LOCALE",
    "DEFAULT_INDENT",
    "AppType",
    "BundleKind",
]
