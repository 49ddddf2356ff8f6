"""Network authentication for curation requests.

Credentials come from the user's netrc file; proxies from the usual
environment variables. install_authenticator() must run before a
password-protected request is attempted and is safe to call repeatedly.
"""

import threading
from typing import Optional, Tuple

import requests
from requests.auth import AuthBase, HTTPBasicAuth
from requests.utils import get_netrc_auth

from pkgcurate.logging_config import logger

_install_lock = threading.Lock()


def request_password_authentication(url: str) -> Optional[Tuple[str, str]]:
    """
    Look up credentials for a URL.

    Args:
        url: The URL a request is about to be sent to

    Returns:
        (username, password) from netrc, or None if none are configured
    """
    credentials = get_netrc_auth(url)
    if credentials is None:
        return None
    username, password = credentials
    return username, password


class NetrcAuth(AuthBase):
    """Attach basic authentication from netrc to requests whose host has an entry."""

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        if "Authorization" in request.headers:
            return request
        credentials = request_password_authentication(request.url or "")
        if credentials:
            return HTTPBasicAuth(*credentials)(request)
        return request


def install_authenticator(session: requests.Session) -> bool:
    """
    Install netrc authentication and environment proxies on a session.

    Authentication the caller already configured on the session is left in place.

    Args:
        session: The session providers will issue requests on

    Returns:
        True if the authenticator was installed, False if the session already
        had authentication
    """
    with _install_lock:
        current = getattr(session, "auth", None)
        if current is not None:
            if not isinstance(current, NetrcAuth):
                logger.debug(f"Keeping caller-provided {type(current).__name__} on HTTP session")
            return False
        session.auth = NetrcAuth()
        session.trust_env = True
        logger.debug("Installed netrc authenticator on HTTP session")
        return True
