"""Installed-version resolution: specifier parsing, ordering and matching."""

from .errors import NoVersionsInstalled, ResolutionError, SystemNotFound, VersionNotInstalled
from .resolver import VersionResolver, resolve

__all__ = [
    "VersionResolver",
    "resolve",
    "ResolutionError",
    "SystemNotFound",
    "NoVersionsInstalled",
    "VersionNotInstalled",
]
