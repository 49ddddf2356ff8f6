"""Tests for the curation entry points."""

from unittest.mock import Mock

import pytest
import requests

from pkgcurate._curation.config import CurationProviderConfig
from pkgcurate._curation.models import CurationRecord, PackageIdentifier
from pkgcurate.curation import create_default_registry, curate_packages
from pkgcurate.exceptions import ConfigurationError


class TestCreateDefaultRegistry:
    def test_clearlydefined_only_by_default(self, mock_session):
        registry = create_default_registry(session=mock_session)
        assert registry.list_providers() == [{"name": "clearlydefined.io"}]

    def test_all_providers(self, mock_session, tmp_path):
        registry = create_default_registry(
            curations_file=tmp_path / "curations.yml",
            release_feed_url="https://feed.example.org/",
            session=mock_session,
        )
        assert [p["name"] for p in registry.list_providers()] == [
            "curations-file",
            "release-feed",
            "clearlydefined.io",
        ]

    def test_invalid_configuration_is_reported(self, mock_session):
        with pytest.raises(ConfigurationError):
            create_default_registry(CurationProviderConfig(read_timeout=0), session=mock_session)

    def test_end_to_end_with_file_and_unreachable_service(self, tmp_path, fast_config):
        path = tmp_path / "curations.yml"
        path.write_text('- id: "NPM::lodash:4.17.21"\n  curations:\n    declared_license: MIT\n', encoding="utf-8")
        session = Mock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.ConnectionError("unreachable")

        registry = create_default_registry(fast_config, curations_file=path, session=session)
        records = curate_packages(["NPM::lodash:4.17.21", "Maven:org.foo:bar:1.0"], registry)

        assert [(str(r.subject), r.declared_license) for r in records] == [("NPM::lodash:4.17.21", "MIT")]


class TestCuratePackages:
    def test_accepts_identifiers_and_strings(self):
        registry = Mock()
        registry.get_curations_for.return_value = []
        identifier = PackageIdentifier("PyPI", "", "requests", "2.31.0")

        curate_packages([identifier, "NPM::lodash:4.17.21"], registry)

        registry.get_curations_for.assert_called_once_with(
            [identifier, PackageIdentifier("NPM", "", "lodash", "4.17.21")]
        )

    def test_invalid_coordinates_are_skipped(self):
        registry = Mock()
        record = CurationRecord(subject=PackageIdentifier("NPM", "", "a", "1"), provenance="x", description="d")
        registry.get_curations_for.return_value = [record]

        assert curate_packages(["garbage", "NPM::a:1"], registry) == [record]
        registry.get_curations_for.assert_called_once_with([PackageIdentifier("NPM", "", "a", "1")])

    def test_nothing_to_curate(self):
        registry = Mock()
        assert curate_packages(["garbage"], registry) == []
        registry.get_curations_for.assert_not_called()
