from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypedDict

from pydantic import BaseModel, Field, ValidationError

from manifest_locales.config.constants import DEFAULT_FALLBACK_LOCALE, DEFAULT_INDENT
from manifest_locales.exceptions import SettingsError
from manifest_locales.utils.json_utils import json_load


if TYPE_CHECKING:
    from typing import Any as ParsedArgs  # Avoid circular import


class TransformOptions(BaseModel):
    pretty_print: bool = True
    indent: int = Field(default=DEFAULT_INDENT, ge=0)
    default_fallback_locale: str = DEFAULT_FALLBACK_LOCALE


class SettingsFile(TypedDict):
    namespace: str
    pretty_print: bool
    indent: int
    default_fallback_locale: str


default_settings: SettingsFile = {
    "namespace": "",
    "pretty_print": True,
    "indent": DEFAULT_INDENT,
    "default_fallback_locale": DEFAULT_FALLBACK_LOCALE,
}


class Settings:
    # from args
    root: Path
    logging_level: int
    # from args or the settings file
    namespace: str
    pretty_print: bool
    indent: int
    default_fallback_locale: str

    PASSTHROUGH = ("_settings", "_args")

    def __init__(self, args: ParsedArgs, path: Path | None = None):
        self._settings: SettingsFile
        if path is None:
            self._settings = dict(default_settings)  # type: ignore[assignment]
        else:
            try:
                self._settings = json_load(path, default_settings)
            except ValueError as exc:
                raise SettingsError(f"Invalid settings file '{path}': {exc}") from exc
        self._args: ParsedArgs = args

    # args take precedence over the settings file
    def __getattr__(self, name: str, /) -> Any:
        if name in self.PASSTHROUGH:
            # passthrough
            return getattr(super(), name)
        elif hasattr(self._args, name):
            return getattr(self._args, name)
        elif name in self._settings:
            return self._settings[name]  # type: ignore[literal-required]
        return getattr(super(), name)

    def __setattr__(self, name: str, value: Any, /) -> None:
        if name in self.PASSTHROUGH:
            # passthrough
            return super().__setattr__(name, value)
        elif name in self._settings:
            self._settings[name] = value  # type: ignore[literal-required]
            return
        raise TypeError(f"{name} is missing a custom setter")

    def __delattr__(self, name: str, /) -> None:
        raise RuntimeError("settings can't be deleted")

    def transform_options(self) -> TransformOptions:
        try:
            return TransformOptions(
                pretty_print=self.pretty_print,
                indent=self.indent,
                default_fallback_locale=self.default_fallback_locale,
            )
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc
