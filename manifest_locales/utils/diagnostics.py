"""Diagnostics sink used to report resolution findings."""

from __future__ import annotations

import logging
from typing import Protocol

from manifest_locales.config.constants import LOGGER_NAME, VERBOSE


class Diagnostics(Protocol):
    def verbose(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggerDiagnostics:
    """Forwards diagnostics to a standard logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(f"{LOGGER_NAME}.transformer")

    def verbose(self, message: str) -> None:
        self._logger.log(VERBOSE, message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)
