"""Curation provider implementations."""

from .clearlydefined import ClearlyDefinedCurationProvider
from .file import FileCurationProvider
from .release_feed import ReleaseFeedCurationProvider

__all__ = [
    "ClearlyDefinedCurationProvider",
    "FileCurationProvider",
    "ReleaseFeedCurationProvider",
]
