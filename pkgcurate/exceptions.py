"""Custom exceptions for pkgcurate."""


class PkgCurateError(Exception):
    """Base exception for all pkgcurate operations."""


class ConfigurationError(PkgCurateError):
    """Raised when configuration validation fails."""


class CurationFileError(PkgCurateError):
    """Raised when a curation file cannot be read or parsed."""
