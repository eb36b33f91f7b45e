"""Pydantic data models for nuget-license."""

from nuget_license.models.library import LibraryInfo, LibraryRepositoryInfo
from nuget_license.models.options import LogLevel, PackageOptions
from nuget_license.models.report import (
    LicenseInformationOrigin,
    LicenseValidationError,
    PackageMetadata,
    ValidatedLicense,
    ValidationResult,
)

__all__ = [
    "LibraryInfo",
    "LibraryRepositoryInfo",
    "LicenseInformationOrigin",
    "LicenseValidationError",
    "LogLevel",
    "PackageMetadata",
    "PackageOptions",
    "ValidatedLicense",
    "ValidationResult",
]
