from __future__ import annotations

import json
from functools import cached_property
from typing import Any

from manifest_locales.config.constants import SAP_APP, SAP_UI5, AppType, JsonType
from manifest_locales.exceptions import ManifestFormatError
from manifest_locales.utils.string_utils import has_manifest_templates, parse_version


class ManifestDocument:
    """
    A parsed manifest.json, together with the text it was parsed from.

    The tree is mutated in place while bundles are processed; ``text`` always holds
    the original content.
    """

    def __init__(self, text: str, path: str = "manifest.json"):
        self.text: str = text
        self.path: str = path
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestFormatError(path, f"invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestFormatError(path, "top-level value must be an object")
        self.data: JsonType = data

    def __repr__(self) -> str:
        return f"ManifestDocument({self.path!r}, version={self.raw_version!r})"

    @property
    def raw_version(self) -> Any:
        return self.data.get("_version")

    @cached_property
    def version(self) -> tuple[int, ...] | None:
        """
        The descriptor version, or None when it's missing or not a dotted-numeric string.
        """
        raw_version = self.raw_version
        if not isinstance(raw_version, str):
            return None
        try:
            return parse_version(raw_version)
        except ValueError:
            return None

    @property
    def sap_app(self) -> JsonType | None:
        sap_app = self.data.get(SAP_APP)
        return sap_app if isinstance(sap_app, dict) else None

    @property
    def sap_ui5(self) -> JsonType | None:
        sap_ui5 = self.data.get(SAP_UI5)
        return sap_ui5 if isinstance(sap_ui5, dict) else None

    @property
    def app_type(self) -> AppType:
        sap_app = self.sap_app or {}
        return AppType.from_value(sap_app.get("type"))

    @property
    def is_library(self) -> bool:
        return self.app_type is AppType.LIBRARY

    @property
    def app_id(self) -> str | None:
        app_id = (self.sap_app or {}).get("id")
        return app_id if isinstance(app_id, str) else None

    @cached_property
    def has_templates(self) -> bool:
        return has_manifest_templates(self.text)
