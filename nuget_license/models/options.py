"""Command-line option Pydantic models for nuget-license."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(Enum):
    """Log level threshold for output display."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    VERBOSE = "verbose"

    @property
    def logging_level(self) -> int:
        """Return the matching stdlib logging level."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
}


class PackageOptions(BaseModel):
    """Options for a license scan run.

    Populated by the command line (see ``nuget_license.cli``). Fields ending
    in ``_option`` hold the raw option string; the resolved values are
    computed on demand by ``ConfigurationResolver``.
    """

    model_config = {"extra": "forbid"}

    allowed_license_types_option: Optional[str] = Field(
        default=None,
        description="JSON file with an array of allowed license types. "
        "If not given, all licenses are allowed.",
    )
    include_project_file: bool = Field(
        default=False,
        description="Add the project file path to package information.",
    )
    log_level: LogLevel = Field(
        default=LogLevel.ERROR,
        description="Log level threshold for output display.",
    )
    manual_information_option: Optional[str] = Field(
        default=None,
        description="JSON file with an array of LibraryInfo objects "
        "for manually determined packages.",
    )
    license_to_url_mappings_option: Optional[str] = Field(
        default=None,
        description="JSON file with a license URL to license mapping "
        "overriding the default mappings.",
    )
    text_output: bool = Field(default=False, description="Save as text file.")
    output_file_name: Optional[str] = Field(default=None, description="Output filename.")
    output_directory: Optional[str] = Field(default=None, description="Output directory.")
    project_directory: Optional[str] = Field(
        default=None,
        description="Folder, project, solution or JSON project list to scan.",
    )
    projects_filter_option: Optional[str] = Field(
        default=None,
        description="JSON file with an array of projects to skip. "
        "Entries match project paths by suffix.",
    )
    packages_filter_option: Optional[str] = Field(
        default=None,
        description="JSON file with an array of packages to skip, or a regular "
        "expression between two forward slashes or two hashes.",
    )
    unique_only: bool = Field(default=False, description="Unique licenses by id/version.")
    print_licenses: bool = Field(default=True, description="Print licenses.")
    json_output: bool = Field(default=False, description="Save licenses as JSON.")
    markdown_output: bool = Field(default=False, description="Save licenses as markdown.")
    export_license_texts: bool = Field(default=False, description="Export raw license texts.")
    include_transitive: bool = Field(
        default=False,
        description="Include transitive package licenses per project file.",
    )
    convert_html_to_text: bool = Field(
        default=False, description="Convert HTML licenses to plain text."
    )
    ignore_ssl_certificate_errors: bool = Field(
        default=False, description="Ignore SSL certificate errors."
    )
    use_project_assets_json: bool = Field(
        default=False,
        description="Use project.assets.json as the package source. "
        "Requires include_transitive.",
    )
    timeout: int = Field(default=10, gt=0, description="HTTP timeout in seconds.")
    proxy_url: Optional[str] = Field(default=None, description="Proxy server URL.")
    proxy_system_auth: bool = Field(
        default=False, description="Use system credentials for proxy authentication."
    )
    report_file: Optional[str] = Field(
        default=None,
        description="Write the consolidated raw/licenses/errors report to this file.",
    )

    @field_validator(
        "allowed_license_types_option",
        "manual_information_option",
        "license_to_url_mappings_option",
        "projects_filter_option",
        "packages_filter_option",
        "report_file",
    )
    @classmethod
    def _empty_as_unset(cls, value: Optional[str]) -> Optional[str]:
        """Treat empty option strings as unset."""
        if value is not None and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_project_assets(self) -> PackageOptions:
        if self.use_project_assets_json and not self.include_transitive:
            raise ValueError("use_project_assets_json requires include_transitive")
        return self
