"""Tests for custom exceptions."""

from nuget_license.exceptions import (
    ConfigurationError,
    NuGetLicenseError,
    OutputError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error_is_exception(self) -> None:
        """Test that NuGetLicenseError inherits from Exception."""
        assert issubclass(NuGetLicenseError, Exception)

    def test_configuration_error_inherits_from_base(self) -> None:
        """Test that ConfigurationError inherits from NuGetLicenseError."""
        assert issubclass(ConfigurationError, NuGetLicenseError)

    def test_output_error_inherits_from_base(self) -> None:
        """Test that OutputError inherits from NuGetLicenseError."""
        assert issubclass(OutputError, NuGetLicenseError)

    def test_configuration_error_attributes(self) -> None:
        """Test that ConfigurationError keeps option and source."""
        error = ConfigurationError(
            "Invalid file", option="--projects-filter", source="skip.json"
        )

        assert str(error) == "Invalid file"
        assert error.option == "--projects-filter"
        assert error.source == "skip.json"

    def test_configuration_error_defaults(self) -> None:
        """Test that ConfigurationError attributes default to None."""
        error = ConfigurationError("Invalid config")

        assert error.option is None
        assert error.source is None

    def test_output_error_attributes(self) -> None:
        """Test that OutputError keeps the destination path."""
        error = OutputError("Cannot write", path="out/report.json")

        assert str(error) == "Cannot write"
        assert error.path == "out/report.json"

    def test_all_exceptions_catchable_by_base(self) -> None:
        """Test that all custom exceptions can be caught by NuGetLicenseError."""
        exceptions = [ConfigurationError("config"), OutputError("output")]

        for exc in exceptions:
            try:
                raise exc
            except NuGetLicenseError:
                pass  # Expected - all should be caught
            else:
                raise AssertionError(f"{type(exc).__name__} not caught by base")
