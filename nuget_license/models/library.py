"""Manually supplied package information models."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class LibraryRepositoryInfo(BaseModel):
    """Source repository of a manually described package."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    type: Optional[str] = Field(default=None, alias="Type")
    url: Optional[str] = Field(default=None, alias="Url")


class LibraryInfo(BaseModel):
    """License information for a package that cannot be resolved automatically.

    Loaded from the ``--manual-package-information`` file, which uses
    PascalCase keys (``PackageName``, ``LicenseType``...). Snake-case field
    names are accepted as well.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    package_name: str = Field(alias="PackageName")
    package_version: Optional[str] = Field(default=None, alias="PackageVersion")
    package_url: Optional[str] = Field(default=None, alias="PackageUrl")
    copyright: Optional[str] = Field(default=None, alias="Copyright")
    authors: List[str] = Field(default_factory=list, alias="Authors")
    description: Optional[str] = Field(default=None, alias="Description")
    license_url: Optional[str] = Field(default=None, alias="LicenseUrl")
    license_type: Optional[str] = Field(default=None, alias="LicenseType")
    repository: Optional[LibraryRepositoryInfo] = Field(default=None, alias="Repository")
