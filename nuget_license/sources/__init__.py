"""Collaborator interfaces for nuget-license."""

from nuget_license.sources.base import LicenseValidator, PackageMetadataSource

__all__ = ["LicenseValidator", "PackageMetadataSource"]
