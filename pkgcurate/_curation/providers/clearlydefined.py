"""ClearlyDefined curation provider (declared license and source location)."""

from typing import Any, Dict, Optional
from urllib.parse import quote

from pkgcurate.logging_config import logger
from pkgcurate.vcs import VcsLocation

from ..base import HttpCurationProvider
from ..license import normalize_declared_license
from ..models import CurationRecord, PackageIdentifier

# Mapping from identifier ecosystem (lowercased) to ClearlyDefined "type/provider"
# See: https://docs.clearlydefined.io/docs/curation/coordinates
ECOSYSTEM_TO_CD_COORDINATES: Dict[str, str] = {
    "maven": "maven/mavencentral",
    "npm": "npm/npmjs",
    "pypi": "pypi/pypi",
    "crate": "crate/cratesio",
    "cargo": "crate/cratesio",
    "gem": "gem/rubygems",
    "nuget": "nuget/nuget",
    "go": "go/golang",
    "golang": "go/golang",
    "pod": "pod/cocoapods",
    "cocoapods": "pod/cocoapods",
    "composer": "composer/packagist",
}

# Source location providers whose repository URL can be derived from namespace/name
SOURCE_PROVIDER_HOSTS: Dict[str, str] = {
    "github": "https://github.com",
    "gitlab": "https://gitlab.com",
}


class ClearlyDefinedCurationProvider(HttpCurationProvider):
    """
    Curation provider backed by the ClearlyDefined curation service.

    Issues one GET per package against
    {server_url}/curations/{type}/{provider}/{namespace}/{name}/{revision},
    concurrently and with the configured timeouts. Packages from ecosystems
    ClearlyDefined does not index are skipped without a request.
    """

    name = "clearlydefined.io"

    def _lookup_url(self, package: PackageIdentifier) -> Optional[str]:
        cd_type = ECOSYSTEM_TO_CD_COORDINATES.get(package.ecosystem.lower())
        if not cd_type or not package.name or not package.version:
            return None

        # Format: type/provider/namespace/name/revision, "-" for no namespace
        namespace = package.namespace or "-"
        segments = (namespace, package.name, package.version)
        coordinate = "/".join(quote(segment, safe="") for segment in segments)
        return f"{self.config.server_url}/curations/{cd_type}/{coordinate}"

    def _parse(self, package: PackageIdentifier, payload: Any) -> Optional[CurationRecord]:
        if not isinstance(payload, dict):
            logger.warning(f"Unexpected ClearlyDefined payload for {package}: {type(payload).__name__}")
            return None

        licensed = payload.get("licensed") or {}
        described = payload.get("described") or {}

        return CurationRecord(
            subject=package,
            provenance=self.name,
            declared_license=normalize_declared_license(licensed.get("declared")),
            vcs=self._parse_source_location(described.get("sourceLocation")),
            homepage=described.get("projectWebsite") or None,
        )

    def _parse_source_location(self, source_location: Any) -> Optional[VcsLocation]:
        if not isinstance(source_location, dict):
            return None

        revision = source_location.get("revision")
        url = source_location.get("url")
        if url:
            return VcsLocation.from_url(url, revision=revision)

        host = SOURCE_PROVIDER_HOSTS.get(str(source_location.get("provider", "")).lower())
        namespace = source_location.get("namespace")
        name = source_location.get("name")
        if host and namespace and name:
            return VcsLocation.from_url(f"{host}/{namespace}/{name}", revision=revision)

        return None
