"""Curation provider reading a local curations file.

Example curations.yml:

    - id: "Maven:org.apache.commons:commons-lang3:3.12.0"
      curations:
        comment: "License taken from the NOTICE file."
        declared_license: "Apache-2.0"
        homepage_url: "https://commons.apache.org/lang"
        vcs:
          url: "git@github.com:apache/commons-lang.git"
          revision: "rel/commons-lang-3.12.0"

    # An empty version applies to every version of the package.
    - id: "NPM::left-pad:"
      curations:
        description: "String left pad"

JSON files with the same structure are accepted as well.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import yaml

from pkgcurate.exceptions import CurationFileError
from pkgcurate.logging_config import logger
from pkgcurate.vcs import VcsLocation

from ..license import normalize_declared_license
from ..models import CurationRecord, PackageIdentifier

DEFAULT_CURATIONS_FILE = "curations.yml"


def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_curations_file(path: Path) -> List[Tuple[PackageIdentifier, Dict[str, Any]]]:
    """
    Parse a curations file into (identifier, curation data) pairs.

    Entries with an invalid id or without a curations mapping are skipped
    with a warning.

    Raises:
        CurationFileError: If the file cannot be read or is not a list of entries
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CurationFileError(f"Cannot read curations file {path}: {e}")
    except yaml.YAMLError as e:
        raise CurationFileError(f"Invalid YAML in curations file {path}: {e}")

    if data is None:
        return []
    if not isinstance(data, list):
        raise CurationFileError(f"Curations file {path} must contain a list of entries")

    entries = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not isinstance(item.get("curations"), dict):
            logger.warning(f"Skipping curation entry #{index} in {path}: expected 'id' and 'curations'")
            continue
        try:
            identifier = PackageIdentifier.from_string(str(item.get("id", "")))
        except ValueError as e:
            logger.warning(f"Skipping curation entry #{index} in {path}: {e}")
            continue
        entries.append((identifier, item["curations"]))
    return entries


def _applies_to(curated: PackageIdentifier, package: PackageIdentifier) -> bool:
    if (curated.ecosystem.lower(), curated.namespace, curated.name) != (
        package.ecosystem.lower(),
        package.namespace,
        package.name,
    ):
        return False
    return not curated.version or curated.version == package.version


class FileCurationProvider:
    """
    Provider that serves curations maintained in a local YAML or JSON file.

    The file is read on every call so that edits are picked up; a missing or
    broken file is logged and yields no curations.
    """

    name: str = "curations-file"

    def __init__(self, path: Union[str, Path] = DEFAULT_CURATIONS_FILE) -> None:
        self.path = Path(path)

    def get_curations_for(self, packages: Sequence[PackageIdentifier]) -> List[CurationRecord]:
        try:
            entries = load_curations_file(self.path)
        except CurationFileError as e:
            logger.warning(str(e))
            return []

        records = []
        for package in dict.fromkeys(packages):
            for curated, data in entries:
                if not _applies_to(curated, package):
                    continue
                try:
                    record = self._to_record(package, data)
                except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
                    logger.warning(f"Skipping malformed curation for {curated} in {self.path}: {e}")
                    continue
                if record.has_data():
                    records.append(record)
        return records

    def _to_record(self, package: PackageIdentifier, data: Dict[str, Any]) -> CurationRecord:
        vcs = None
        vcs_data = data.get("vcs")
        if isinstance(vcs_data, dict) and _text(vcs_data, "url"):
            vcs = VcsLocation.from_url(_text(vcs_data, "url") or "", revision=_text(vcs_data, "revision"))

        comment = _text(data, "comment")
        provenance = f"{self.name}: {comment}" if comment else self.name

        return CurationRecord(
            subject=package,
            provenance=provenance,
            declared_license=normalize_declared_license(_text(data, "declared_license")),
            vcs=vcs,
            description=_text(data, "description"),
            homepage=_text(data, "homepage_url"),
        )
