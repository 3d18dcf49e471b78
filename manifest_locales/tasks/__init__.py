"""Tasks wiring the transformer to workspaces."""

from manifest_locales.tasks.transform_manifest import (
    TransformReport,
    namespace_pattern,
    transform_manifest,
)


__all__ = ["TransformReport", "namespace_pattern", "transform_manifest"]
