"""Scan driver feeding per-project results into a report writer."""
import asyncio
import logging
from typing import NamedTuple

from nuget_license.analysis.filtering import filter_packages, filter_projects
from nuget_license.config.resolver import ConfigurationResolver
from nuget_license.constants import MAX_CONCURRENT_PROJECTS
from nuget_license.output.report_writer import ReportWriter
from nuget_license.sources.base import LicenseValidator, PackageMetadataSource

logger = logging.getLogger(__name__)


class ScanSummary(NamedTuple):
    """Summary of a scan run.

    Attributes:
        scanned_projects: Projects that were looked up and validated.
        skipped_projects: Projects matched by the project filter.
        skipped_packages: Ids of packages matched by the package filter.
    """

    scanned_projects: list[str]
    skipped_projects: list[str]
    skipped_packages: list[str]


async def scan_projects(
    projects: list[str],
    resolver: ConfigurationResolver,
    metadata_source: PackageMetadataSource,
    validator: LicenseValidator,
    writer: ReportWriter,
) -> ScanSummary:
    """Scan projects concurrently and record results in ``writer``.

    Projects matched by the project filter are skipped. For every other
    project the packages are looked up, packages matched by the package
    filter are dropped, the rest are recorded as raw metadata and then
    validated.

    Writing the report is left to the caller.

    Args:
        projects: Project file paths to scan.
        resolver: Resolved configuration for the run.
        metadata_source: Package metadata lookup.
        validator: License validator.
        writer: Report writer receiving contributions.

    Returns:
        ScanSummary of scanned and skipped items.

    Raises:
        ConfigurationError: If a filter option cannot be resolved.
        Exception: Whatever a lookup or validation raises is propagated.
    """
    # Filters are resolved before the first lookup
    project_result = filter_projects(projects, resolver.project_filter)
    package_filter = resolver.package_filter

    for project in project_result.skipped:
        logger.info("Skipping project %s (matched project filter)", project)

    semaphore = asyncio.Semaphore(MAX_CONCURRENT_PROJECTS)

    async def scan_one(project: str) -> list[str]:
        async with semaphore:
            logger.debug("Looking up packages for %s", project)
            metadata = await metadata_source.lookup(project)

            package_result = filter_packages(metadata, package_filter)
            for package_id in package_result.skipped_ids:
                logger.debug("Skipping package %s in %s", package_id, project)

            for package in package_result.packages:
                writer.add_raw(project, package)

            result = await validator.validate(project, package_result.packages)
            writer.add_validator_results(result.validated_licenses, result.errors)
            logger.debug(
                "Validated %s: %d licenses, %d errors",
                project,
                len(result.validated_licenses),
                len(result.errors),
            )
            return package_result.skipped_ids

    skipped_per_project = await asyncio.gather(
        *(scan_one(project) for project in project_result.projects)
    )

    return ScanSummary(
        scanned_projects=project_result.projects,
        skipped_projects=project_result.skipped,
        skipped_packages=[pkg for skipped in skipped_per_project for pkg in skipped],
    )
