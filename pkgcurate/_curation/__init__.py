"""Plugin-based package curation architecture."""

from .config import CurationProviderConfig, load_config
from .fetch import ResilientFetcher
from .models import CurationRecord, FetchOutcome, FetchStatus, PackageIdentifier
from .protocol import CurationProvider
from .providers import ClearlyDefinedCurationProvider, FileCurationProvider, ReleaseFeedCurationProvider
from .registry import CurationProviderRegistry

__all__ = [
    "ClearlyDefinedCurationProvider",
    "CurationProvider",
    "CurationProviderConfig",
    "CurationProviderRegistry",
    "CurationRecord",
    "FetchOutcome",
    "FetchStatus",
    "FileCurationProvider",
    "PackageIdentifier",
    "ReleaseFeedCurationProvider",
    "ResilientFetcher",
    "load_config",
]
