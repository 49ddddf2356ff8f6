"""Provider registry for querying several curation providers."""

from typing import Any, Dict, List, Sequence

from pkgcurate.logging_config import logger

from .models import CurationRecord, PackageIdentifier
from .protocol import CurationProvider


class CurationProviderRegistry:
    """
    Registry holding the configured curation providers.

    get_curations_for() asks every provider in registration order and returns
    all their records side by side. Deciding which provider wins when several
    curate the same package is left to the caller.

    Example:
        registry = CurationProviderRegistry()
        registry.register(FileCurationProvider("curations.yml"))
        registry.register(ClearlyDefinedCurationProvider())

        records = registry.get_curations_for(packages)
    """

    def __init__(self) -> None:
        self._providers: List[CurationProvider] = []

    def register(self, provider: CurationProvider) -> None:
        self._providers.append(provider)
        logger.debug(f"Registered curation provider: {provider.name}")

    def get_curations_for(self, packages: Sequence[PackageIdentifier]) -> List[CurationRecord]:
        """
        Collect curations from all registered providers.

        A provider that raises despite the protocol is logged and skipped;
        records for packages that were not requested are dropped.

        Args:
            packages: Package identifiers to curate

        Returns:
            Records from all providers, grouped by provider in registration order
        """
        requested = set(packages)
        records: List[CurationRecord] = []

        for provider in self._providers:
            try:
                provided = provider.get_curations_for(packages)
            except Exception as e:
                logger.warning(f"Error fetching curations from {provider.name}: {e}")
                continue

            for record in provided:
                if record.subject in requested:
                    records.append(record)
                else:
                    logger.warning(f"Dropping curation from {provider.name} for unrequested package {record.subject}")

        return records

    def list_providers(self) -> List[Dict[str, Any]]:
        """List the names of all registered providers in query order."""
        return [{"name": p.name} for p in self._providers]

    def clear(self) -> None:
        """Remove all registered providers."""
        self._providers.clear()
