from __future__ import annotations


__all__ = [
    "ManifestLocalesException",
    "DirectoryListingError",
    "ManifestFormatError",
    "SettingsError",
]


class ManifestLocalesException(Exception):
    """
    Base exception class for this project.
    """

    def __init__(self, *args: object):
        if not args:
            args = ("Unknown error",)
        super().__init__(*args)


class DirectoryListingError(ManifestLocalesException):
    """
    Raised when a directory holding properties files cannot be listed.
    """

    def __init__(self, path: str, reason: str = "directory not found"):
        super().__init__(f"Unable to list '{path}': {reason}")
        self.path: str = path
        self.reason: str = reason


class ManifestFormatError(ManifestLocalesException):
    """
    Raised when a manifest's content isn't a JSON object.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path: str = path
        self.reason: str = reason


class SettingsError(ManifestLocalesException):
    pass
