"""Fuzzy matching of release artifact names against package versions.

Release feeds, tag lists and curation services label artifacts with very
inconsistent names: "v1.2.3", "docutils-0.10", "3.3.1-npm-packages",
"release-2_0" and so on. This module decides which of those names denote a
given version while rejecting prefix collisions like "1.0.10" for "0.10".
"""

import re
from typing import List, NamedTuple, Optional, Sequence, Tuple

VERSION_SEPARATORS: Tuple[str, ...] = ("-", "_", ".")
IGNORABLE_AFFIXES: Tuple[str, ...] = ("rel", "release", "final")

_SEPARATOR_CLASS = "[" + "".join(re.escape(s) for s in VERSION_SEPARATORS) + "]"
_SEPARATOR_PATTERN = re.compile(_SEPARATOR_CLASS)
_AFFIX_GROUP = "(" + "|".join(IGNORABLE_AFFIXES) + ")"
_IGNORABLE_AFFIX_PATTERN = re.compile(
    f"(^{_AFFIX_GROUP}{_SEPARATOR_CLASS}|{_SEPARATOR_CLASS}{_AFFIX_GROUP}$)"
)


class VersionVariant(NamedTuple):
    """A rewritten form of a version string and the separators it uses."""

    text: str
    separators: Tuple[str, ...]


def build_version_variants(version: str) -> List[VersionVariant]:
    """
    Build the variants of a version string that candidate names are tested against.

    The list contains the lowercased version itself, one variant per separator
    with every separator rewritten to it, and one variant per ignorable
    trailing token with that token stripped.

    Args:
        version: Version string, e.g. "1.2.3" or "2.0-final"

    Returns:
        List of VersionVariant, possibly with duplicates
    """
    version_lower = version.lower()
    variants = [VersionVariant(version_lower, VERSION_SEPARATORS)]

    for separator in VERSION_SEPARATORS:
        variants.append(VersionVariant(_SEPARATOR_PATTERN.sub(separator, version_lower), (separator,)))

    for affix in IGNORABLE_AFFIXES:
        stripped = version_lower[: -len(affix)] if version_lower.endswith(affix) else version_lower
        variants.append(VersionVariant(stripped.rstrip("".join(VERSION_SEPARATORS)), VERSION_SEPARATORS))

    return variants


def _has_ignorable_suffix_only(name: str, variant: VersionVariant) -> bool:
    # "3.3.1-npm-packages" is fine for "3.3.1", "3.3.1.0" is not.
    if not name.startswith(variant.text):
        return False
    tail = name[len(variant.text) :]
    return not tail or tail[0] not in variant.separators


def _has_ignorable_prefix_only(name: str, variant: VersionVariant, version_has_separator: bool) -> bool:
    # "docutils-0.10" is fine for "0.10", "docutils-1.0.10" is not.
    if not name.endswith(variant.text):
        return False
    head = name[: len(name) - len(variant.text)]
    last = head[-1] if head else None
    forelast = head[-2] if len(head) > 1 else None

    separators = variant.separators if version_has_separator else VERSION_SEPARATORS

    if last is None:
        return True
    if last not in separators and not last.isdigit():
        return True
    if last in separators and (forelast is None or not forelast.isdigit()):
        return True
    return last == "v" and (forelast is None or forelast in separators)


def filter_version_names(version: str, names: Sequence[str], project: Optional[str] = None) -> List[str]:
    """
    Filter a list of names to those that likely denote the given version.

    Exact matches (ignoring case) win outright. Otherwise a name is kept if,
    after stripping ignorable "rel"/"release"/"final" affixes, it starts with a
    variant of the version followed by something that is not a separator, or
    ends with a variant preceded by a word boundary or a "v" prefix.

    Args:
        version: The version to look for
        names: Candidate names, e.g. tag or release artifact names
        project: Optional project name; when given, names starting with it are
            preferred, unless that leaves nothing

    Returns:
        The matching names in their original order and spelling
    """
    if not version or not version.strip() or not names:
        return []

    version_lower = version.lower()
    full_matches = [name for name in names if name.lower() == version_lower]
    if full_matches:
        return full_matches

    variants = build_version_variants(version)
    version_has_separator = any(separator in version for separator in VERSION_SEPARATORS)

    filtered = []
    for name in names:
        stripped = _IGNORABLE_AFFIX_PATTERN.sub("", name.lower())
        if any(
            _has_ignorable_suffix_only(stripped, variant)
            or _has_ignorable_prefix_only(stripped, variant, version_has_separator)
            for variant in variants
        ):
            filtered.append(name)

    if not project or not project.strip():
        return filtered

    by_project = [name for name in filtered if name.startswith(project)]
    return by_project or filtered
