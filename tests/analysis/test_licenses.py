"""Tests for license lookups."""
from nuget_license.analysis.licenses import (
    find_manual_information,
    is_license_allowed,
    license_from_url,
)
from nuget_license.config.defaults import DEFAULT_LICENSE_URL_MAPPINGS
from nuget_license.models.library import LibraryInfo


class TestIsLicenseAllowed:
    """Tests for is_license_allowed function."""

    def test_empty_allow_list_allows_everything(self) -> None:
        """Test that no allow-list allows all licenses."""
        assert is_license_allowed("GPL-3.0", []) is True
        assert is_license_allowed(None, []) is True

    def test_listed_license_allowed(self) -> None:
        """Test that listed licenses are allowed."""
        assert is_license_allowed("MIT", ["MIT", "Apache-2.0"]) is True

    def test_unlisted_license_denied(self) -> None:
        """Test that other licenses are denied."""
        assert is_license_allowed("GPL-3.0", ["MIT"]) is False
        assert is_license_allowed(None, ["MIT"]) is False


class TestLicenseFromUrl:
    """Tests for license_from_url function."""

    def test_known_url(self) -> None:
        """Test mapping a default URL."""
        assert license_from_url("https://licenses.nuget.org/MIT", DEFAULT_LICENSE_URL_MAPPINGS) == "MIT"

    def test_unknown_url(self) -> None:
        """Test that unknown URLs map to None."""
        assert license_from_url("https://example.com/license", DEFAULT_LICENSE_URL_MAPPINGS) is None

    def test_missing_url(self) -> None:
        """Test that a missing URL maps to None."""
        assert license_from_url(None, DEFAULT_LICENSE_URL_MAPPINGS) is None


class TestFindManualInformation:
    """Tests for find_manual_information function."""

    def test_matches_case_insensitive_id(self) -> None:
        """Test that ids compare case-insensitively."""
        info = LibraryInfo(PackageName="Internal.Lib", LicenseType="MIT")

        assert find_manual_information("internal.lib", "1.0.0", [info]) is info

    def test_version_must_match_when_set(self) -> None:
        """Test that versioned entries only match that version."""
        old = LibraryInfo(PackageName="Internal.Lib", PackageVersion="1.0.0", LicenseType="MIT")
        new = LibraryInfo(PackageName="Internal.Lib", PackageVersion="2.0.0", LicenseType="Apache-2.0")

        assert find_manual_information("Internal.Lib", "2.0.0", [old, new]) is new
        assert find_manual_information("Internal.Lib", "3.0.0", [old, new]) is None

    def test_no_match(self) -> None:
        """Test that unknown packages return None."""
        assert find_manual_information("Serilog", "3.1.1", []) is None
