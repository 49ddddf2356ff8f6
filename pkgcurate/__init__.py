"""Package curation toolkit.

Reconciles externally sourced package curations (declared licenses, source
locations) with a catalog of package identifiers.
"""

from .vcs import VcsLocation, normalize_vcs_url
from .version_matching import filter_version_names

__all__ = [
    "VcsLocation",
    "filter_version_names",
    "normalize_vcs_url",
]
