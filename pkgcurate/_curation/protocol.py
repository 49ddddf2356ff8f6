"""CurationProvider protocol for curation source plugins."""

from typing import List, Protocol, Sequence

from .models import CurationRecord, PackageIdentifier


class CurationProvider(Protocol):
    """
    Protocol defining the interface for curation provider plugins.

    A provider looks up curated metadata (declared license, source
    location, description) for a batch of package identifiers.

    Example:
        class InMemoryProvider:
            name = "in-memory"

            def get_curations_for(self, packages):
                return [CurationRecord(subject=p, provenance=self.name, declared_license="MIT") for p in packages]
    """

    @property
    def name(self) -> str:
        """
        Human-readable name of this provider.

        Used for logging and as the provenance of returned records.
        Examples: "clearlydefined.io", "release-feed", "curations.yml"
        """
        ...

    def get_curations_for(self, packages: Sequence[PackageIdentifier]) -> List[CurationRecord]:
        """
        Look up curations for a batch of packages.

        Implementations must:
        1. Only return records whose subject is one of `packages`
        2. Treat timeouts, unreachable endpoints and malformed responses as
           "no curation" for the affected package, never raising
        3. Keep looking up the remaining packages after a failure
        4. Pass VCS locations through normalize_vcs_url()

        Args:
            packages: Package identifiers to curate

        Returns:
            Zero or more CurationRecords, in no particular order
        """
        ...
