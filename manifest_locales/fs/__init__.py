"""Filesystem collaborators: directory listing and manifest workspaces."""

from manifest_locales.fs.listing import DirectoryLister, LocalDirectoryLister
from manifest_locales.fs.resources import ManifestResource, Workspace


__all__ = [
    "DirectoryLister",
    "LocalDirectoryLister",
    "ManifestResource",
    "Workspace",
]
