"""Core constants, enums, and type definitions for manifest locale resolution."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any


# Logging special levels
VERBOSE: int = logging.INFO - 1
logging.addLevelName(VERBOSE, "VERBOSE")

# Logging configuration
LOGGING_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: VERBOSE,
    4: logging.DEBUG,
}
OUTPUT_FORMATTER = logging.Formatter("{levelname}: {message}", style="{", datefmt="%H:%M:%S")
LOGGER_NAME = "ManifestLocales"

# Type aliases
JsonType = dict[str, Any]

# Descriptor versions below this one don't know about supportedLocales
MIN_DESCRIPTOR_VERSION: tuple[int, int, int] = (1, 21, 0)

# Manifest sections and keys
SAP_APP = "sap.app"
SAP_UI5 = "sap.ui5"
RESOURCE_MODEL_TYPE = "sap.ui.model.resource.ResourceModel"
PROPERTIES_EXT = ".properties"
MANIFEST_FILENAME = "manifest.json"

# Bundle defaults
DEFAULT_APP_BUNDLE_URL = "i18n/i18n.properties"
DEFAULT_LIBRARY_BUNDLE_URL = "messagebundle.properties"
DEFAULT_FALLBACK_LOCALE = "en"

# Output formatting
DEFAULT_INDENT = 2


class AppType(Enum):
    APPLICATION = "application"
    COMPONENT = "component"
    LIBRARY = "library"
    CARD = "card"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> AppType:
        # the descriptor defaults to "application" when the type is omitted
        if value is None:
            return cls.APPLICATION
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class BundleKind(Enum):
    APP = "sap.app/i18n"
    MODEL = "sap.ui5/models"
    LIBRARY = "sap.ui5/library/i18n"
    TERMINOLOGY = "terminologies"
    ENHANCEMENT = "enhanceWith"
