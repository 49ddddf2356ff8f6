"""Resilient HTTP fetching for curation providers.

Every lookup ends in a FetchOutcome. Timeouts, connection failures, HTTP
errors and unparseable bodies are classified and logged here so that
providers only have to decide what a payload means.
"""

import requests

from pkgcurate.logging_config import logger

from .config import CurationProviderConfig
from .models import FetchOutcome, FetchStatus


class ResilientFetcher:
    """
    Timeout-bounded JSON GETs over a shared requests.Session.

    The session is shared read-only between worker threads; each call carries
    its own (connect, read) timeout so one slow lookup cannot hold up others.
    """

    def __init__(self, session: requests.Session, config: CurationProviderConfig) -> None:
        self._session = session
        self._config = config

    @property
    def timeout(self) -> tuple:
        return (self._config.connect_timeout, self._config.read_timeout)

    def get_json(self, url: str, context: str) -> FetchOutcome:
        """
        GET a URL and decode its JSON body.

        Args:
            url: Absolute URL to fetch
            context: Short description used in log messages, e.g. the package

        Returns:
            FetchOutcome; never raises for transport or parse failures
        """
        trace = self._config.print_stack_trace
        logger.debug(f"Fetching {url} for {context}")

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Timeout fetching curations for {context} after {self._config.read_timeout}s")
            return FetchOutcome(FetchStatus.TIMEOUT, detail=str(e))
        except requests.exceptions.RequestException as e:
            logger.warning(f"Error fetching curations for {context}: {e}", exc_info=trace)
            return FetchOutcome(FetchStatus.UNREACHABLE, detail=str(e))

        if response.status_code == 404:
            logger.debug(f"No curations found for {context}")
            return FetchOutcome.empty(detail="HTTP 404")
        if not 200 <= response.status_code < 300:
            logger.warning(f"Failed to fetch curations for {context}: HTTP {response.status_code}")
            return FetchOutcome(FetchStatus.UNREACHABLE, detail=f"HTTP {response.status_code}")

        try:
            # requests raises a ValueError subclass for invalid JSON
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Malformed curation response for {context}: {e}", exc_info=trace)
            return FetchOutcome(FetchStatus.MALFORMED, detail=str(e))

        if not payload:
            return FetchOutcome.empty(detail="empty payload")
        return FetchOutcome(FetchStatus.OK, payload=payload)
