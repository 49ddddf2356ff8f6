"""Tests for declared license normalization."""

import pytest

from pkgcurate._curation.license import normalize_declared_license


class TestNormalizeDeclaredLicense:
    @pytest.mark.parametrize("value", [None, "", "  ", "NOASSERTION", "noassertion", "NONE", "OTHER"])
    def test_placeholders_yield_none(self, value):
        assert normalize_declared_license(value) is None

    @pytest.mark.parametrize(
        "value", ["MIT", "Apache-2.0", "MIT OR Apache-2.0", "GPL-2.0-only WITH Classpath-exception-2.0"]
    )
    def test_valid_expressions_are_kept(self, value):
        assert normalize_declared_license(value) == value

    def test_surrounding_whitespace_is_removed(self):
        assert normalize_declared_license("  MIT  ") == "MIT"

    @pytest.mark.parametrize("value", ["()", "  ()  "])
    def test_unparseable_expressions_are_kept_verbatim(self, value):
        assert normalize_declared_license(value) == value.strip()

    def test_unknown_license_is_kept(self):
        assert normalize_declared_license("LicenseRef-proprietary") == "LicenseRef-proprietary"
