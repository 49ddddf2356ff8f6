"""Curation of package identifiers from the configured providers.

This is the entry point catalog code uses: build a registry once, then hand
it batches of package identifiers.

    registry = create_default_registry(curations_file="curations.yml")
    records = curate_packages(["Maven:org.foo:bar:1.2.3"], registry)
"""

from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional, Union

import requests

from pkgcurate.logging_config import logger

from ._curation import (
    ClearlyDefinedCurationProvider,
    CurationProviderConfig,
    CurationProviderRegistry,
    CurationRecord,
    FileCurationProvider,
    PackageIdentifier,
    ReleaseFeedCurationProvider,
)


def create_default_registry(
    config: Optional[CurationProviderConfig] = None,
    curations_file: Optional[Union[str, Path]] = None,
    release_feed_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> CurationProviderRegistry:
    """
    Create a registry with the standard providers.

    Providers are queried in this order:
    - FileCurationProvider, if a curations file is given
    - ReleaseFeedCurationProvider, if a release feed URL is given
    - ClearlyDefinedCurationProvider against config.server_url

    Args:
        config: Network provider settings, defaults to CurationProviderConfig()
        curations_file: Optional path to a local curations file
        release_feed_url: Optional base URL of a release feed service
        session: Optional shared requests.Session

    Returns:
        Configured CurationProviderRegistry

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    config = config or CurationProviderConfig()
    registry = CurationProviderRegistry()

    if curations_file:
        registry.register(FileCurationProvider(curations_file))

    if release_feed_url:
        feed_config = replace(config, server_url=release_feed_url)
        registry.register(ReleaseFeedCurationProvider(feed_config, session=session))

    registry.register(ClearlyDefinedCurationProvider(config, session=session))
    return registry


def _to_identifier(package: Union[str, PackageIdentifier]) -> Optional[PackageIdentifier]:
    if isinstance(package, PackageIdentifier):
        return package
    try:
        return PackageIdentifier.from_string(package)
    except ValueError as e:
        logger.warning(f"Skipping package: {e}")
        return None


def curate_packages(
    packages: Iterable[Union[str, PackageIdentifier]],
    registry: Optional[CurationProviderRegistry] = None,
) -> List[CurationRecord]:
    """
    Look up curations for packages given as identifiers or coordinate strings.

    Unparseable coordinate strings are logged and skipped.

    Args:
        packages: Identifiers like "Maven:org.foo:bar:1.2.3"
        registry: Registry to query, defaults to create_default_registry()

    Returns:
        All records from all providers
    """
    identifiers = [i for i in (_to_identifier(p) for p in packages) if i is not None]
    if not identifiers:
        return []

    registry = registry or create_default_registry()
    records = registry.get_curations_for(identifiers)
    logger.info(f"Collected {len(records)} curations for {len(identifiers)} packages")
    return records
