"""Collaborator interfaces consumed by the scan driver."""

from abc import ABC, abstractmethod

from nuget_license.models.report import PackageMetadata, ValidationResult


class PackageMetadataSource(ABC):
    """Abstract base class for package metadata lookups.

    Implementations resolve the packages referenced by a project and fetch
    their metadata from a package feed.
    """

    @abstractmethod
    async def lookup(self, project: str) -> list[PackageMetadata]:
        """Return metadata for every package referenced by a project.

        Args:
            project: Path of the project file.

        Returns:
            List of package metadata, in the order the feed returned them.
        """


class LicenseValidator(ABC):
    """Abstract base class for license validators."""

    @abstractmethod
    async def validate(
        self, project: str, packages: list[PackageMetadata]
    ) -> ValidationResult:
        """Validate the licenses of a project's packages.

        Lookup or validation problems for single packages are reported as
        entries of ``ValidationResult.errors`` rather than raised.
        """
