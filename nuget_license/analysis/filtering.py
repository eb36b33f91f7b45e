"""Project and package filtering for resolved filter options."""

from __future__ import annotations

from typing import Iterable, NamedTuple

from nuget_license.config.filters import PackageFilter, matches_project_filter
from nuget_license.models.report import PackageMetadata


class ProjectFilterResult(NamedTuple):
    """Result of filtering projects.

    Attributes:
        projects: Projects kept for scanning, in input order.
        skipped: Projects matched by the project filter.
    """

    projects: list[str]
    skipped: list[str]


class PackageFilterResult(NamedTuple):
    """Result of filtering packages.

    Attributes:
        packages: Packages kept, in input order.
        skipped_ids: Ids of packages matched by the package filter.
    """

    packages: list[PackageMetadata]
    skipped_ids: list[str]


def filter_projects(
    projects: Iterable[str], project_filter: Iterable[str]
) -> ProjectFilterResult:
    """Drop projects whose path ends with a project filter entry.

    Args:
        projects: Project file paths.
        project_filter: Normalized entries from the ``--projects-filter`` file.

    Returns:
        ProjectFilterResult with kept and skipped projects.
    """
    entries = tuple(project_filter)
    kept: list[str] = []
    skipped: list[str] = []

    for project in projects:
        if entries and matches_project_filter(project, entries):
            skipped.append(project)
        else:
            kept.append(project)

    return ProjectFilterResult(projects=kept, skipped=skipped)


def filter_packages(
    packages: Iterable[PackageMetadata], package_filter: PackageFilter
) -> PackageFilterResult:
    """Drop packages matched by the resolved package filter.

    Args:
        packages: Package metadata entries.
        package_filter: Filter from ``ConfigurationResolver.package_filter``.

    Returns:
        PackageFilterResult with kept packages and skipped ids.
    """
    kept: list[PackageMetadata] = []
    skipped_ids: list[str] = []

    for package in packages:
        if package_filter.matches(package.id):
            skipped_ids.append(package.id)
        else:
            kept.append(package)

    return PackageFilterResult(packages=kept, skipped_ids=skipped_ids)
