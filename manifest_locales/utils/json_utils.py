"""JSON serialization and deserialization utilities."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar, cast

from manifest_locales.config.constants import DEFAULT_INDENT, JsonType


_JSON_T = TypeVar("_JSON_T", bound=Mapping[Any, Any])


def json_minify(data: JsonType | list[JsonType]) -> str:
    """Return minified JSON string (no whitespace)."""
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False)


def json_dumps_manifest(
    data: JsonType, *, pretty_print: bool = True, indent: int = DEFAULT_INDENT
) -> str:
    """
    Serialize a manifest tree back to text.

    Key order is the insertion order of the tree, so keys added while processing
    end up after their pre-existing siblings. Non-ASCII characters are kept as-is.
    """
    if not pretty_print:
        return json_minify(data)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def merge_json(obj: JsonType, template: Mapping[Any, Any]) -> None:
    """
    Merge a JSON object with a template, ensuring all expected keys exist.

    NOTE: This modifies object in place.

    - Removes keys not present in template
    - Overwrites values with wrong type from template
    - Recursively merges nested dictionaries
    - Adds missing keys from template
    """
    for k, v in list(obj.items()):
        if k not in template:
            del obj[k]
        elif type(v) is not type(template[k]):
            # types don't match: overwrite from template
            obj[k] = template[k]
        elif isinstance(v, dict):
            assert isinstance(template[k], dict)
            merge_json(v, template[k])
    # ensure the object is not missing any keys
    for k in template:
        if k not in obj:
            obj[k] = template[k]


def json_load(path: Path, defaults: _JSON_T, *, merge: bool = True) -> _JSON_T:
    """
    Load JSON from a file with defaults and optional merging.

    Args:
        path: Path to JSON file
        defaults: Default values to use if file doesn't exist or merge is enabled
        merge: If True, merge loaded data with defaults template

    Returns:
        Loaded and optionally merged JSON data
    """
    defaults_dict: JsonType = dict(defaults)
    if path.exists():
        with open(path, encoding="utf8") as file:
            combined = json.load(file)
        if not isinstance(combined, dict):
            raise ValueError("top-level value must be an object")
        if merge:
            merge_json(combined, defaults_dict)
    else:
        combined = defaults_dict
    return cast(_JSON_T, combined)
