from __future__ import annotations

from typing import Any, NamedTuple, Union

from manifest_locales.config.constants import BundleKind, JsonType


class StringForm(NamedTuple):
    bundle_url: str


class BooleanForm(NamedTuple):
    enabled: bool


class ObjectForm(NamedTuple):
    config: JsonType


BundleConfigForm = Union[StringForm, BooleanForm, ObjectForm]


def classify_bundle_config(value: Any) -> BundleConfigForm | None:
    """
    Classify an ``i18n`` manifest value, returning None for values that can't describe a bundle.
    """
    # JSON true/false, never a URL
    if isinstance(value, bool):
        return BooleanForm(value)
    elif isinstance(value, str):
        return StringForm(value)
    elif isinstance(value, dict):
        return ObjectForm(value)
    return None


class BundleReference:
    """
    A handle onto one live bundle configuration object inside a manifest tree.

    Writes go straight to the wrapped dict, so the manifest picks them up without
    any re-navigation.
    """

    __slots__ = ("node", "kind", "label")

    def __init__(self, node: JsonType, kind: BundleKind, label: str):
        self.node: JsonType = node
        self.kind: BundleKind = kind
        self.label: str = label

    def __repr__(self) -> str:
        return f"BundleReference({self.label!r}, {self.node!r})"

    @property
    def bundle_url(self) -> str | None:
        value = self.node.get("bundleUrl")
        return value if isinstance(value, str) else None

    @property
    def bundle_name(self) -> str | None:
        value = self.node.get("bundleName")
        return value if isinstance(value, str) else None

    @property
    def has_supported_locales(self) -> bool:
        # any value counts, including an empty list and the [""] opt-out sentinel
        return "supportedLocales" in self.node

    @property
    def supported_locales(self) -> list[str] | None:
        return self.node.get("supportedLocales")

    @supported_locales.setter
    def supported_locales(self, locales: list[str]) -> None:
        self.node["supportedLocales"] = locales

    @property
    def explicit_fallback_locale(self) -> str | None:
        value = self.node.get("fallbackLocale")
        return value if isinstance(value, str) else None

    def terminologies(self) -> list[tuple[str, JsonType]]:
        terminologies = self.node.get("terminologies")
        if not isinstance(terminologies, dict):
            return []
        return [(name, config) for name, config in terminologies.items() if isinstance(config, dict)]

    def enhancements(self) -> list[JsonType]:
        enhance_with = self.node.get("enhanceWith")
        if not isinstance(enhance_with, list):
            return []
        return [config for config in enhance_with if isinstance(config, dict)]

