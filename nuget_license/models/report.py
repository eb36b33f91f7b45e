"""Report entry Pydantic models."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class LicenseInformationOrigin(Enum):
    """Where the license of a validated package was determined from."""

    EXPRESSION = "expression"
    URL = "url"
    FILE = "file"
    MANUAL = "manual"
    UNKNOWN = "unknown"


class PackageMetadata(BaseModel):
    """Raw metadata of a package as returned by the package feed lookup."""

    model_config = {"extra": "forbid"}

    id: str = Field(description="Package identifier")
    version: str = Field(description="Package version")
    title: Optional[str] = Field(default=None, description="Display title")
    authors: Optional[str] = Field(default=None, description="Package authors")
    description: Optional[str] = Field(default=None, description="Package description")
    license_url: Optional[str] = Field(default=None, description="License URL")
    license_expression: Optional[str] = Field(
        default=None, description="SPDX license expression"
    )
    project_url: Optional[str] = Field(default=None, description="Project URL")
    copyright: Optional[str] = Field(default=None, description="Copyright notice")


class ValidatedLicense(BaseModel):
    """A package whose license passed validation."""

    model_config = {"extra": "forbid"}

    package_id: str = Field(description="Package identifier")
    package_version: str = Field(description="Package version")
    license: str = Field(description="License identifier")
    license_information_origin: LicenseInformationOrigin = Field(
        default=LicenseInformationOrigin.UNKNOWN,
        description="Source of the license information",
    )
    package_project_url: Optional[str] = Field(default=None, description="Project URL")
    license_url: Optional[str] = Field(default=None, description="License URL")
    copyright: Optional[str] = Field(default=None, description="Copyright notice")
    authors: Optional[str] = Field(default=None, description="Package authors")


class LicenseValidationError(BaseModel):
    """A package that failed license validation."""

    model_config = {"extra": "forbid"}

    context: str = Field(description="Project the package was found in")
    package_id: str = Field(description="Package identifier")
    package_version: str = Field(description="Package version")
    messages: list[str] = Field(default_factory=list, description="Validation messages")


class ValidationResult(BaseModel):
    """Outcome of validating the packages of one project."""

    model_config = {"extra": "forbid"}

    validated_licenses: list[ValidatedLicense] = Field(default_factory=list)
    errors: list[LicenseValidationError] = Field(default_factory=list)
