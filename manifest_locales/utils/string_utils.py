"""String manipulation utility functions."""

from __future__ import annotations

import re


# handlebars-style {{placeholder}} texts resolved from the sap.app bundle at runtime
MANIFEST_TEMPLATE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
_VERSION_PATTERN = re.compile(r"^\s*v?(\d+(?:\.\d+)*)")


def has_manifest_templates(text: str) -> bool:
    """Check if a manifest text contains any {{placeholder}} templates."""
    return MANIFEST_TEMPLATE_PATTERN.search(text) is not None


def parse_version(version: str) -> tuple[int, ...]:
    """
    Parse a dotted-numeric version string into a tuple comparable with other versions.

    Missing minor and patch parts count as zero, trailing pre-release or build
    suffixes are ignored.

    Raises:
        ValueError: If the string doesn't start with a dotted-numeric version
    """
    match = _VERSION_PATTERN.match(version)
    if match is None:
        raise ValueError(f"Invalid version: {version!r}")
    parts = tuple(int(part) for part in match.group(1).split("."))
    return parts + (0,) * (3 - len(parts))
