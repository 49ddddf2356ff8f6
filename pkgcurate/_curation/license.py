"""Declared license normalization."""

from typing import Optional

from license_expression import ExpressionError, get_spdx_licensing

from pkgcurate.logging_config import logger

_spdx_licensing = get_spdx_licensing()

# Values curation services use for "nothing declared"
NO_LICENSE_VALUES = frozenset({"", "NOASSERTION", "NONE", "OTHER"})

# The boolean.py parser underneath raises plain IndexError/TypeError on input like "()"
_PARSE_ERRORS = (ExpressionError, AttributeError, IndexError, TypeError, ValueError)


def normalize_declared_license(value: Optional[str]) -> Optional[str]:
    """
    Normalize a declared license string to a canonical SPDX expression.

    Known SPDX keys are rewritten to their canonical spelling, e.g.
    "mit or apache-2.0" becomes "MIT OR Apache-2.0". Unparseable expressions
    are kept verbatim, placeholders like NOASSERTION yield None.

    Args:
        value: Raw license string from a curation source

    Returns:
        Normalized expression, or None if nothing was declared
    """
    if value is None:
        return None
    stripped = value.strip()
    if stripped.upper() in NO_LICENSE_VALUES:
        return None

    try:
        parsed = _spdx_licensing.parse(stripped)
    except _PARSE_ERRORS as e:
        logger.debug(f"Keeping unparseable license expression '{stripped}': {e}")
        return stripped
    if parsed is None:
        return None
    return parsed.render()
