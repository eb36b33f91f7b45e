"""License lookups driven by resolved configuration."""
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from nuget_license.models.library import LibraryInfo


def is_license_allowed(license_id: Optional[str], allowed: Iterable[str]) -> bool:
    """Check a license against the ``--allowed-license-types`` list.

    An empty allow-list allows every license, including unknown ones.
    Otherwise the license must appear in the list exactly.
    """
    allowed_set = set(allowed)
    if not allowed_set:
        return True
    return license_id is not None and license_id in allowed_set


def license_from_url(url: Optional[str], mappings: Mapping[str, str]) -> Optional[str]:
    """Map a license URL to a license identifier.

    Args:
        url: License URL from package metadata.
        mappings: Resolved license URL mappings.

    Returns:
        The mapped license identifier, or None if the URL is unknown.
    """
    if not url:
        return None
    return mappings.get(url)


def find_manual_information(
    package_id: str,
    version: str,
    manual_information: Iterable[LibraryInfo],
) -> Optional[LibraryInfo]:
    """Find manually supplied information for a package.

    Package ids compare case-insensitively. An entry without a version
    applies to every version of the package.

    Returns:
        The first matching entry, or None.
    """
    folded = package_id.casefold()
    for info in manual_information:
        if info.package_name.casefold() != folded:
            continue
        if info.package_version is None or info.package_version == version:
            return info
    return None
