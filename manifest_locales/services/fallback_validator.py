from __future__ import annotations

from enum import Enum

from manifest_locales.config.constants import DEFAULT_FALLBACK_LOCALE
from manifest_locales.models.bundle import BundleReference
from manifest_locales.utils.diagnostics import Diagnostics


class FallbackCheck(Enum):
    OK = "ok"
    WARNING = "warning"  # default fallback missing, locales are still written
    REJECTED = "rejected"  # explicit fallback missing, nothing is written

    @property
    def writable(self) -> bool:
        return self is not FallbackCheck.REJECTED


def _quote_locales(locales: list[str]) -> str:
    if not locales:
        return "none"
    return "'" + "', '".join(locales) + "'"


def check_fallback_locale(
    locales: list[str],
    bundle: BundleReference,
    diagnostics: Diagnostics,
    *,
    default_fallback_locale: str = DEFAULT_FALLBACK_LOCALE,
    source: str = "manifest.json",
) -> FallbackCheck:
    """
    Check the generated locales against the bundle's fallback locale.

    A missing explicitly configured fallbackLocale is an error and rejects the locales.
    A missing default fallback locale only produces a warning.
    """
    explicit_fallback = bundle.explicit_fallback_locale
    if explicit_fallback is not None:
        if explicit_fallback in locales:
            return FallbackCheck.OK
        diagnostics.error(
            f"{source}: Generated supported locales ({_quote_locales(locales)}) for "
            f"bundle '{bundle.label}' not containing the defined fallback locale "
            f"'{explicit_fallback}'. Either provide a properties file for defined "
            "fallbackLocale or configure another available fallbackLocale"
        )
        return FallbackCheck.REJECTED
    if default_fallback_locale in locales:
        return FallbackCheck.OK
    diagnostics.warn(
        f"{source}: Generated supported locales ({_quote_locales(locales)}) for "
        f"bundle '{bundle.label}' do not contain default fallback locale "
        f"'{default_fallback_locale}'. Either provide a properties file for "
        f"'{default_fallback_locale}' or configure another available fallbackLocale"
    )
    return FallbackCheck.WARNING
