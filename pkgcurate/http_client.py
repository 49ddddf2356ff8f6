"""HTTP client utilities with consistent user agent."""

from typing import Optional

import requests


def _get_package_version() -> str:
    """Get the package version for the User-Agent header."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("pkgcurate")
    except PackageNotFoundError:
        return "unknown"


USER_AGENT = f"pkgcurate/{_get_package_version()}"


def get_default_headers(token: Optional[str] = None, accept: Optional[str] = "application/json") -> dict:
    """
    Get default HTTP headers with user agent.

    Args:
        token: Optional bearer token to include
        accept: Optional Accept header value

    Returns:
        Dictionary of HTTP headers
    """
    headers = {"User-Agent": USER_AGENT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if accept:
        headers["Accept"] = accept
    return headers


def create_session(token: Optional[str] = None) -> requests.Session:
    """Create a requests.Session carrying the default headers.

    The session is meant to be shared by all worker threads of a provider.
    """
    session = requests.Session()
    session.headers.update(get_default_headers(token))
    return session
