"""Release feed curation provider.

Some curation services do not key their data by exact version but publish a
feed of release-labelled entries per package, e.g.

    {"entries": [
        {"name": "docutils-0.10", "license": "BSD-2-Clause",
         "vcs_url": "git@github.com:docutils/docutils.git", "vcs_revision": "0.10"},
        {"name": "docutils-1.0.10", "license": "BSD-3-Clause"}
    ]}

The entry for a requested version is picked with filter_version_names().
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pkgcurate.logging_config import logger
from pkgcurate.vcs import VcsLocation
from pkgcurate.version_matching import filter_version_names

from ..base import HttpCurationProvider
from ..license import normalize_declared_license
from ..models import CurationRecord, PackageIdentifier


def _extract_entries(payload: Any) -> List[Dict[str, Any]]:
    """Return the well-formed entries of a feed payload, skipping broken ones."""
    if isinstance(payload, dict):
        payload = payload.get("entries")
    if not isinstance(payload, list):
        return []

    entries = []
    for entry in payload:
        if isinstance(entry, dict) and isinstance(entry.get("name"), str) and entry["name"].strip():
            entries.append(entry)
        else:
            logger.debug(f"Skipping malformed release feed entry: {entry!r}")
    return entries


def _optional_str(entry: Dict[str, Any], key: str) -> Optional[str]:
    value = entry.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class ReleaseFeedCurationProvider(HttpCurationProvider):
    """
    Curation provider for services publishing release-labelled entries.

    Fetches {server_url}/{ecosystem}/{namespace}/{name} per package and keeps
    the first entry whose name denotes the requested version.
    """

    name = "release-feed"

    def _lookup_url(self, package: PackageIdentifier) -> Optional[str]:
        if not package.name or not package.version:
            return None
        segments = (package.ecosystem.lower(), package.namespace or "-", package.name)
        return f"{self.config.server_url}/" + "/".join(quote(segment, safe="") for segment in segments)

    def _parse(self, package: PackageIdentifier, payload: Any) -> Optional[CurationRecord]:
        entries = _extract_entries(payload)
        if not entries:
            return None

        by_name: Dict[str, Dict[str, Any]] = {}
        for entry in entries:
            by_name.setdefault(entry["name"], entry)

        matched = filter_version_names(package.version, list(by_name), project=package.name)
        if len(matched) > 1:
            logger.debug(f"Several release feed entries match {package}: {matched}")

        for entry_name in matched:
            record = self._to_record(package, entry_name, by_name[entry_name])
            if record.has_data():
                return record

        logger.debug(f"No release feed entry denotes version {package.version} of {package.name}")
        return None

    def _to_record(self, package: PackageIdentifier, entry_name: str, entry: Dict[str, Any]) -> CurationRecord:
        vcs_url = _optional_str(entry, "vcs_url")
        vcs = VcsLocation.from_url(vcs_url, revision=_optional_str(entry, "vcs_revision")) if vcs_url else None

        return CurationRecord(
            subject=package,
            provenance=f"{self.name}: {entry_name}",
            declared_license=normalize_declared_license(_optional_str(entry, "license")),
            vcs=vcs,
            description=_optional_str(entry, "description"),
            homepage=_optional_str(entry, "homepage"),
        )
