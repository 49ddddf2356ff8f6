"""Data model shared by curation providers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from packageurl import PackageURL

from pkgcurate.vcs import VcsLocation

# Identifier ecosystems whose package URL type is spelled differently
_ECOSYSTEM_TO_PURL_TYPE = {
    "crate": "cargo",
    "go": "golang",
    "gomod": "golang",
    "pod": "cocoapods",
}
_PURL_TYPE_TO_ECOSYSTEM = {
    "maven": "Maven",
    "npm": "NPM",
    "pypi": "PyPI",
    "cargo": "Crate",
    "gem": "Gem",
    "nuget": "NuGet",
    "golang": "Go",
    "cocoapods": "Pod",
    "composer": "Composer",
    "pub": "Pub",
}


@dataclass(frozen=True)
class PackageIdentifier:
    """
    Identifies one release of a package.

    The string form is "<ecosystem>:<namespace>:<name>:<version>", e.g.
    "Maven:org.apache.commons:commons-lang3:3.12.0". Namespace and version may
    be empty.
    """

    ecosystem: str
    namespace: str
    name: str
    version: str

    @classmethod
    def from_string(cls, coordinates: str) -> "PackageIdentifier":
        parts = coordinates.split(":", 3)
        if len(parts) != 4:
            raise ValueError(f"Invalid package identifier '{coordinates}': expected 'type:namespace:name:version'")
        ecosystem, namespace, name, version = (part.strip() for part in parts)
        return cls(ecosystem=ecosystem, namespace=namespace, name=name, version=version)

    @classmethod
    def from_purl(cls, purl: PackageURL) -> "PackageIdentifier":
        ecosystem = _PURL_TYPE_TO_ECOSYSTEM.get(purl.type, purl.type)
        return cls(
            ecosystem=ecosystem,
            namespace=purl.namespace or "",
            name=purl.name,
            version=purl.version or "",
        )

    def to_purl(self) -> PackageURL:
        lowered = self.ecosystem.lower()
        purl_type = _ECOSYSTEM_TO_PURL_TYPE.get(lowered, lowered)
        return PackageURL(
            type=purl_type,
            namespace=self.namespace or None,
            name=self.name,
            version=self.version or None,
        )

    def to_coordinates(self) -> str:
        return f"{self.ecosystem}:{self.namespace}:{self.name}:{self.version}"

    def __str__(self) -> str:
        return self.to_coordinates()


@dataclass(frozen=True)
class CurationRecord:
    """
    Curated metadata for one package, as returned by a provider.

    All curated fields are optional; `provenance` names the provider that
    produced the record and, where useful, the upstream entry it came from.
    """

    subject: PackageIdentifier
    provenance: str
    declared_license: Optional[str] = None
    vcs: Optional[VcsLocation] = None
    description: Optional[str] = None
    homepage: Optional[str] = None

    def has_data(self) -> bool:
        """Check if this record curates anything at all."""
        return bool(self.declared_license or self.vcs or self.description or self.homepage)


class FetchStatus(Enum):
    """Classification of a single network lookup."""

    OK = "ok"
    EMPTY = "empty"
    TIMEOUT = "timeout"
    UNREACHABLE = "unreachable"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one network lookup. Failures are values, not exceptions."""

    status: FetchStatus
    payload: Any = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @classmethod
    def empty(cls, detail: str = "") -> "FetchOutcome":
        return cls(FetchStatus.EMPTY, detail=detail)
