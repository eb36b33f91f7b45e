"""Custom exceptions for nuget-license."""
from __future__ import annotations

from typing import Optional


class NuGetLicenseError(Exception):
    """Base exception for all nuget-license errors."""

    pass


class ConfigurationError(NuGetLicenseError):
    """Exception raised when an option or its backing file is invalid.

    Attributes:
        option: Name of the offending option (e.g. ``--packages-filter``).
        source: File path or inline pattern the option pointed at.
    """

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.option = option
        self.source = source


class OutputError(NuGetLicenseError):
    """Exception raised when a report cannot be written.

    Attributes:
        path: Destination path of the report.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
