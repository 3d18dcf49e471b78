"""Auto-fills supportedLocales of manifest.json text bundles from the properties files on disk."""

from manifest_locales.version import __version__


__all__ = ["__version__"]
