"""VCS URL normalization.

Package manifests and curation services spell the same repository in many
ways: scp-like "git@host:path", bare "github.com/org/repo", "git+https://",
"git://", trailing slashes, local filesystem paths. normalize_vcs_url()
reduces all of them to one canonical string so that two locations compare
equal exactly when they name the same repository.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import Optional
from urllib.parse import SplitResult, urlsplit

from pkgcurate.logging_config import logger

KNOWN_GIT_HOSTS = ("github.com", "gitlab.com")

# host:path without a scheme, see https://git-scm.com/docs/git-clone#_git_urls
_SCP_LIKE_PATTERN = re.compile(r"^(.*)([a-zA-Z]+):([a-zA-Z]+)(.*)$")
# e.g. "git+https://..." or "hg+ssh://..."
_COMPOUND_SCHEME_PATTERN = re.compile(r"^(.+)\+(.+)(://.+)$")
# Characters a hierarchical URI must not contain unescaped
_ILLEGAL_URI_CHARS = re.compile(r'[\s\\"<>{}|^`]')
_WINDOWS_DRIVE_PATTERN = re.compile(r"^[a-zA-Z]:[\\/]")


def _parse_uri(url: str) -> Optional[SplitResult]:
    if _ILLEGAL_URI_CHARS.search(url):
        return None
    try:
        parts = urlsplit(url)
        # Accessing the hostname validates bracketed IPv6 authorities.
        parts.hostname
    except ValueError:
        return None
    return parts


def _path_to_file_uri(path: str) -> str:
    if _WINDOWS_DRIVE_PATTERN.match(path):
        return PureWindowsPath(path).as_uri()
    return Path(path).absolute().as_uri()


def _is_known_git_host(host: Optional[str]) -> bool:
    return bool(host) and any(host.endswith(known) for known in KNOWN_GIT_HOSTS)


def normalize_vcs_url(vcs_url: str) -> str:
    """
    Normalize a string representing a VCS URL to a common string form.

    Examples:
        "git://github.com/foo/bar"       -> "https://github.com/foo/bar.git"
        "git@github.com:foo/bar.git"     -> "ssh://git@github.com/foo/bar.git"
        "git+https://gitlab.com/foo/bar" -> "https://gitlab.com/foo/bar.git"
        "/home/user/repo"                -> "file:///home/user/repo"

    Args:
        vcs_url: The raw VCS location

    Returns:
        The canonical form. Never raises; if nothing can be made of the input
        the trimmed input is returned.
    """
    url = vcs_url.strip().rstrip("/")

    # The unauthenticated git protocol is blocked by most VCS hosts.
    if url.startswith("git://"):
        url = "https://" + url[len("git://") :]

    match = _SCP_LIKE_PATTERN.match(url)
    if match:
        tail = f"{match.group(1)}{match.group(2)}/{match.group(3)}{match.group(4)}"
        url = tail if "://" in url else f"ssh://{tail}"

    # scp-like URLs that do not use a ":" after the server part
    if url.startswith("git@"):
        url = f"ssh://{url}"

    if not url.startswith("svn+"):
        url = _COMPOUND_SCHEME_PATTERN.sub(r"\2\3", url)

    if url.startswith(KNOWN_GIT_HOSTS):
        url = f"https://{url}"

    uri = _parse_uri(url)
    if uri is None or (not uri.scheme and uri.path):
        try:
            return _path_to_file_uri(url)
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot interpret VCS URL '{vcs_url}' as a path: {e}")
            return url

    if _is_known_git_host(uri.hostname):
        # The dropped fragment may have hidden a trailing slash.
        path = uri.path.rstrip("/")
        if not path.endswith(".git") and path.count("/") == 2:
            path = f"{path}.git"

        query = f"?{uri.query}" if uri.query.strip() else ""

        if uri.scheme == "ssh":
            authority = uri.netloc if uri.netloc.startswith("git@") else f"git@{uri.netloc}"
            return f"ssh://{authority}{path}{query}"

        host = uri.netloc.rpartition("@")[2]
        if host.startswith("www."):
            host = host[len("www.") :]
        return f"https://{host}{path}{query}"

    return url


@dataclass(frozen=True)
class VcsLocation:
    """
    A canonical VCS location.

    Only built through from_url(), so `url` is always the output of
    normalize_vcs_url(). Equality looks at the canonical URL and the revision.
    """

    url: str
    revision: str = ""
    scheme: str = field(default="", compare=False)
    host: str = field(default="", compare=False)
    path: str = field(default="", compare=False)

    @classmethod
    def from_url(cls, raw_url: str, revision: Optional[str] = None) -> "VcsLocation":
        url = normalize_vcs_url(raw_url)
        parts = _parse_uri(url)
        if parts is None:
            return cls(url=url, revision=(revision or "").strip())

        return cls(
            url=url,
            revision=(revision or parts.query or "").strip(),
            scheme=parts.scheme,
            host=parts.hostname or "",
            path=parts.path,
        )

    def same_repository(self, other: "VcsLocation") -> bool:
        """Check whether both locations name the same repository, ignoring revisions."""
        return self.url == other.url

    def __str__(self) -> str:
        return self.url
