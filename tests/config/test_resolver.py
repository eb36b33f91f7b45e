"""Tests for ConfigurationResolver."""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable
from unittest.mock import patch

import pytest

from nuget_license.config import loader
from nuget_license.config.defaults import DEFAULT_LICENSE_URL_MAPPINGS
from nuget_license.config.filters import (
    LiteralPackageFilter,
    NoPackageFilter,
    PatternPackageFilter,
)
from nuget_license.config.resolver import ConfigurationResolver
from nuget_license.exceptions import ConfigurationError
from nuget_license.models.library import LibraryInfo
from nuget_license.models.options import PackageOptions

WriteJson = Callable[[str, Any], Path]


def _fail_on_read(*args: Any, **kwargs: Any) -> Any:
    raise AssertionError("file system was touched")


class TestResolveListOption:
    """Tests for resolve_list_option."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_option_reads_nothing(self, value: str | None) -> None:
        """Test that an unset option returns () without any file read."""
        resolver = ConfigurationResolver()

        with patch.object(loader, "load_json_file", side_effect=_fail_on_read), patch.object(
            Path, "read_text", _fail_on_read
        ):
            result = resolver.resolve_list_option("--allowed-license-types", value)

        assert result == ()

    def test_reads_file_once(self, write_json: WriteJson) -> None:
        """Test that the second call is served from the cache."""
        path = write_json("allowed.json", ["MIT", "Apache-2.0"])
        resolver = ConfigurationResolver()

        with patch.object(loader, "load_json_file", wraps=loader.load_json_file) as spy:
            first = resolver.resolve_list_option("--allowed-license-types", str(path))
            second = resolver.resolve_list_option("--allowed-license-types", str(path))

        assert first == ("MIT", "Apache-2.0")
        assert second is first
        assert spy.call_count == 1

    def test_file_changes_are_ignored(self, write_json: WriteJson) -> None:
        """Test that a computed list does not change when the file does."""
        path = write_json("allowed.json", ["MIT"])
        resolver = ConfigurationResolver()

        first = resolver.resolve_list_option("--allowed-license-types", str(path))
        write_json("allowed.json", ["GPL-3.0"])
        second = resolver.resolve_list_option("--allowed-license-types", str(path))

        assert first == second == ("MIT",)

    def test_failure_is_not_cached(self, tmp_path: Path, write_json: WriteJson) -> None:
        """Test that a failed resolution is retried on the next access."""
        path = tmp_path / "allowed.json"
        resolver = ConfigurationResolver()

        with pytest.raises(ConfigurationError):
            resolver.resolve_list_option("--allowed-license-types", str(path))

        write_json("allowed.json", ["MIT"])
        result = resolver.resolve_list_option("--allowed-license-types", str(path))

        assert result == ("MIT",)

    def test_missing_file_names_option_and_path(self, tmp_path: Path) -> None:
        """Test that the error names the option and the file."""
        path = tmp_path / "missing.json"
        resolver = ConfigurationResolver()

        with pytest.raises(ConfigurationError) as exc_info:
            resolver.resolve_list_option("--allowed-license-types", str(path))

        assert "--allowed-license-types" in str(exc_info.value)
        assert str(path) in str(exc_info.value)

    def test_concurrent_first_access_reads_once(self, write_json: WriteJson) -> None:
        """Test that concurrent first accesses compute the list once."""
        path = write_json("allowed.json", ["MIT"])
        resolver = ConfigurationResolver()
        results: list[tuple[str, ...]] = []

        def worker() -> None:
            results.append(resolver.resolve_list_option("--allowed-license-types", str(path)))

        with patch.object(loader, "load_json_file", wraps=loader.load_json_file) as spy:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert spy.call_count == 1
        assert all(result is results[0] for result in results)


class TestResolveMappingOption:
    """Tests for resolve_mapping_option."""

    def test_user_file_wins(self, write_json: WriteJson) -> None:
        """Test that user entries override and extend the defaults."""
        path = write_json("mappings.json", {"urlA": "Apache-2.0", "urlB": "BSD"})
        defaults = {"urlA": "MIT"}
        resolver = ConfigurationResolver()

        result = resolver.resolve_mapping_option("--licenseurl-to-license-mappings", str(path), defaults)

        assert dict(result) == {"urlA": "Apache-2.0", "urlB": "BSD"}
        assert defaults == {"urlA": "MIT"}

    def test_unset_option_returns_defaults(self) -> None:
        """Test that an unset option yields the defaults without reading."""
        resolver = ConfigurationResolver()

        with patch.object(loader, "load_json_file", side_effect=_fail_on_read):
            result = resolver.resolve_mapping_option(
                "--licenseurl-to-license-mappings", None, {"urlA": "MIT"}
            )

        assert dict(result) == {"urlA": "MIT"}

    def test_result_is_read_only(self) -> None:
        """Test that the resolved mapping cannot be modified."""
        resolver = ConfigurationResolver()
        result = resolver.resolve_mapping_option("--licenseurl-to-license-mappings", None, {})

        with pytest.raises(TypeError):
            result["url"] = "MIT"  # type: ignore[index]

    def test_reads_file_once(self, write_json: WriteJson) -> None:
        """Test that the mapping file is read once."""
        path = write_json("mappings.json", {"urlB": "BSD"})
        resolver = ConfigurationResolver()

        with patch.object(loader, "load_json_file", wraps=loader.load_json_file) as spy:
            first = resolver.resolve_mapping_option("--licenseurl-to-license-mappings", str(path), {})
            second = resolver.resolve_mapping_option("--licenseurl-to-license-mappings", str(path), {})

        assert second is first
        assert spy.call_count == 1

    def test_invalid_file_raises_error(self, tmp_path: Path) -> None:
        """Test that an unparseable file raises ConfigurationError."""
        path = tmp_path / "mappings.json"
        path.write_text("{not json", encoding="utf-8")
        resolver = ConfigurationResolver()

        with pytest.raises(ConfigurationError) as exc_info:
            resolver.resolve_mapping_option("--licenseurl-to-license-mappings", str(path), {})

        assert exc_info.value.option == "--licenseurl-to-license-mappings"


class TestResolvePackageFilter:
    """Tests for resolve_package_filter."""

    def test_unset_option_is_no_filter(self) -> None:
        """Test that an unset option disables package filtering."""
        resolver = ConfigurationResolver()

        assert isinstance(resolver.resolve_package_filter(None), NoPackageFilter)

    @pytest.mark.parametrize("value", ["/abc/", "#abc#"])
    def test_wrapped_value_is_pattern(self, value: str) -> None:
        """Test that /abc/ and #abc# compile the inner text without reading files."""
        resolver = ConfigurationResolver()

        with patch.object(loader, "load_json_file", side_effect=_fail_on_read):
            result = resolver.resolve_package_filter(value)

        assert isinstance(result, PatternPackageFilter)
        assert result.pattern.pattern == "abc"
        assert result.matches("xABCx") is True

    def test_plain_value_reads_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that abc is treated as a literal list file named abc."""
        (tmp_path / "abc").write_text('["Newtonsoft.Json"]', encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        resolver = ConfigurationResolver()

        with patch.object(loader, "load_json_file", wraps=loader.load_json_file) as spy:
            result = resolver.resolve_package_filter("abc")

        spy.assert_called_once_with("--packages-filter", "abc")
        assert isinstance(result, LiteralPackageFilter)
        assert result.names == frozenset({"Newtonsoft.Json"})

    @pytest.mark.parametrize(
        "option_value, pattern_text",
        [
            ("/(/", "("),
            ("/a{4294967296}/", "a{4294967296}"),
            ("/a{99999999999999999999}/", "a{99999999999999999999}"),
        ],
    )
    def test_invalid_pattern_names_pattern(self, option_value: str, pattern_text: str) -> None:
        """Test that a pattern that fails to compile raises ConfigurationError naming it."""
        resolver = ConfigurationResolver()

        with pytest.raises(ConfigurationError) as exc_info:
            resolver.resolve_package_filter(option_value)

        assert f"'{pattern_text}'" in str(exc_info.value)
        assert exc_info.value.option == "--packages-filter"
        assert exc_info.value.source == pattern_text
        assert exc_info.value.__cause__ is not None

    def test_mode_is_decided_once(self) -> None:
        """Test that repeated resolution returns the same filter object."""
        resolver = ConfigurationResolver()

        first = resolver.resolve_package_filter("#^System\\.#")
        second = resolver.resolve_package_filter("#^System\\.#")

        assert second is first

    def test_literal_mode_never_yields_pattern(self, write_json: WriteJson) -> None:
        """Test that a literal list file never produces a pattern filter."""
        path = write_json("packages.json", ["/abc/"])
        resolver = ConfigurationResolver()

        result = resolver.resolve_package_filter(str(path))

        assert isinstance(result, LiteralPackageFilter)
        assert result.matches("/abc/") is True
        assert result.matches("abc") is False


class TestResolveProjectFilter:
    """Tests for resolve_project_filter."""

    def test_entries_are_normalized(self, write_json: WriteJson) -> None:
        """Test that separators are normalized to forward slashes."""
        path = write_json("projects.json", ["Tests.csproj", "src\\Legacy\\Legacy.csproj"])
        resolver = ConfigurationResolver()

        result = resolver.resolve_project_filter(str(path))

        assert result == ("Tests.csproj", "src/Legacy/Legacy.csproj")

    def test_unset_option_is_empty(self) -> None:
        """Test that an unset option yields no entries."""
        assert ConfigurationResolver().resolve_project_filter(None) == ()


class TestOptionAccessors:
    """Tests for the accessors bound to PackageOptions fields."""

    def test_accessors_use_options(self, write_json: WriteJson) -> None:
        """Test that each accessor resolves its option field."""
        options = PackageOptions(
            allowed_license_types_option=str(write_json("allowed.json", ["MIT"])),
            manual_information_option=str(
                write_json("manual.json", [{"PackageName": "Internal.Lib", "LicenseType": "MIT"}])
            ),
            projects_filter_option=str(write_json("projects.json", ["Tests.csproj"])),
            packages_filter_option="/^System\\./",
            license_to_url_mappings_option=str(write_json("mappings.json", {"urlB": "BSD"})),
        )
        resolver = ConfigurationResolver(options)

        assert resolver.allowed_license_types == ("MIT",)
        assert resolver.manual_information == (
            LibraryInfo(PackageName="Internal.Lib", LicenseType="MIT"),
        )
        assert resolver.project_filter == ("Tests.csproj",)
        assert isinstance(resolver.package_filter, PatternPackageFilter)
        assert resolver.license_to_url_mappings["urlB"] == "BSD"
        assert (
            resolver.license_to_url_mappings["https://opensource.org/licenses/MIT"] == "MIT"
        )

    def test_defaults_without_options(self) -> None:
        """Test that a resolver without options resolves to defaults."""
        resolver = ConfigurationResolver()

        assert resolver.allowed_license_types == ()
        assert resolver.manual_information == ()
        assert resolver.project_filter == ()
        assert isinstance(resolver.package_filter, NoPackageFilter)
        assert dict(resolver.license_to_url_mappings) == dict(DEFAULT_LICENSE_URL_MAPPINGS)
