"""Configuration handling for nuget-license."""
from __future__ import annotations

from nuget_license.config.defaults import DEFAULT_LICENSE_URL_MAPPINGS
from nuget_license.config.filters import (
    LiteralPackageFilter,
    NoPackageFilter,
    PackageFilter,
    PatternPackageFilter,
    matches_project_filter,
)
from nuget_license.config.resolver import ConfigurationResolver

__all__ = [
    "ConfigurationResolver",
    "DEFAULT_LICENSE_URL_MAPPINGS",
    "LiteralPackageFilter",
    "NoPackageFilter",
    "PackageFilter",
    "PatternPackageFilter",
    "matches_project_filter",
]
