"""Filtering and license lookups for nuget-license."""

from nuget_license.analysis.filtering import (
    PackageFilterResult,
    ProjectFilterResult,
    filter_packages,
    filter_projects,
)
from nuget_license.analysis.licenses import (
    find_manual_information,
    is_license_allowed,
    license_from_url,
)

__all__ = [
    "PackageFilterResult",
    "ProjectFilterResult",
    "filter_packages",
    "filter_projects",
    "find_manual_information",
    "is_license_allowed",
    "license_from_url",
]
