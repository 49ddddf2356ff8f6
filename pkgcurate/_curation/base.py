"""Shared machinery for HTTP-backed curation providers."""

from typing import Any, List, Optional, Sequence

import requests

from pkgcurate.auth import install_authenticator
from pkgcurate.http_client import create_session
from pkgcurate.logging_config import logger

from .batch import run_batch
from .cache import MISSING, ExpiringCache
from .config import CurationProviderConfig
from .fetch import ResilientFetcher
from .models import CurationRecord, FetchStatus, PackageIdentifier


class HttpCurationProvider:
    """
    Base class for providers that look up each package with one HTTP request.

    Subclasses implement _lookup_url() and _parse(). This class takes care of
    authentication, the (connect, read) timeouts, concurrency, the batch
    deadline and caching. Failed lookups are never cached, so a later call
    retries them.
    """

    name: str = "http"

    def __init__(
        self,
        config: Optional[CurationProviderConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or CurationProviderConfig()
        self.config.validate()
        self._session = session if session is not None else create_session()
        install_authenticator(self._session)
        self._fetcher = ResilientFetcher(self._session, self.config)
        self._cache: ExpiringCache[CurationRecord] = ExpiringCache(self.config.cache_expiration_hours)

    def clear_cache(self) -> None:
        self._cache.clear()

    def get_curations_for(self, packages: Sequence[PackageIdentifier]) -> List[CurationRecord]:
        unique = list(dict.fromkeys(packages))
        if not unique:
            return []

        records = run_batch(unique, self._curate, self.config.max_workers, self.config.deadline)
        logger.info(f"{self.name}: found curations for {len(records)} of {len(unique)} packages")
        return records

    def _curate(self, package: PackageIdentifier) -> Optional[CurationRecord]:
        url = self._lookup_url(package)
        if url is None:
            logger.debug(f"{self.name} does not support package {package}")
            return None

        key = package.to_coordinates()
        cached = self._cache.get(key)
        if cached is not MISSING:
            logger.debug(f"Cache hit ({self.name}): {package}")
            return cached

        outcome = self._fetcher.get_json(url, context=str(package))
        if outcome.status is FetchStatus.EMPTY:
            self._cache.put(key, None)
            return None
        if not outcome.ok:
            return None

        try:
            record = self._parse(package, outcome.payload)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                f"Malformed curation data from {self.name} for {package}: {e}",
                exc_info=self.config.print_stack_trace,
            )
            return None
        if record is not None and not record.has_data():
            record = None
        self._cache.put(key, record)
        return record

    def _lookup_url(self, package: PackageIdentifier) -> Optional[str]:
        """Return the URL to fetch for a package, or None if it is unsupported."""
        raise NotImplementedError

    def _parse(self, package: PackageIdentifier, payload: Any) -> Optional[CurationRecord]:
        """Turn a decoded JSON payload into a record, or None if it holds nothing usable."""
        raise NotImplementedError
