"""Domain models for manifest locale resolution."""

from manifest_locales.models.bundle import (
    BooleanForm,
    BundleConfigForm,
    BundleReference,
    ObjectForm,
    StringForm,
    classify_bundle_config,
)
from manifest_locales.models.manifest import ManifestDocument


__all__ = [
    "ManifestDocument",
    "BundleReference",
    "BundleConfigForm",
    "StringForm",
    "BooleanForm",
    "ObjectForm",
    "classify_bundle_config",
]
