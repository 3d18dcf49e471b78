"""Utility modules for manifest locale resolution."""

from __future__ import annotations

# Async helpers
from .async_helpers import format_traceback, settle

# Diagnostics
from .diagnostics import Diagnostics, LoggerDiagnostics

# JSON utilities
from .json_utils import json_dumps_manifest, json_load, json_minify, merge_json

# String utilities
from .string_utils import has_manifest_templates, parse_version


__all__ = [
    # String utilities
    "has_manifest_templates",
    "parse_version",
    # JSON utilities
    "json_minify",
    "json_dumps_manifest",
    "json_load",
    "merge_json",
    # Async helpers
    "format_traceback",
    "settle",
    # Diagnostics
    "Diagnostics",
    "LoggerDiagnostics",
]
