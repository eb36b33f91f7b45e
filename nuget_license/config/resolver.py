"""Lazy, cached resolution of file-backed options."""
from __future__ import annotations

import logging
import re
import threading
from types import MappingProxyType
from typing import Any, Callable, Hashable, Mapping, Optional, TypeVar

from nuget_license.config import loader
from nuget_license.config.defaults import DEFAULT_LICENSE_URL_MAPPINGS
from nuget_license.config.filters import (
    LiteralPackageFilter,
    NoPackageFilter,
    PackageFilter,
    PatternPackageFilter,
    extract_inline_pattern,
    normalize_path,
)
from nuget_license.constants import (
    ALLOWED_LICENSE_TYPES_OPTION,
    LICENSE_TO_URL_MAPPINGS_OPTION,
    MANUAL_INFORMATION_OPTION,
    PACKAGES_FILTER_OPTION,
    PROJECTS_FILTER_OPTION,
)
from nuget_license.exceptions import ConfigurationError
from nuget_license.models.library import LibraryInfo
from nuget_license.models.options import PackageOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigurationResolver:
    """Turn raw option strings into ready-to-use filters and mappings.

    Every resolved value is computed on first access and cached for the
    lifetime of the resolver, keyed by option name and option value. Edits
    to a backing file after it was read are not picked up. Failed
    resolutions are not cached, so the next access tries again.

    The resolver is safe to share between threads; concurrent first
    accesses to the same option compute the value once.
    """

    def __init__(self, options: Optional[PackageOptions] = None) -> None:
        self.options = options or PackageOptions()
        self._cache: dict[Hashable, Any] = {}
        self._lock = threading.RLock()

    def _cached(self, key: Hashable, compute: Callable[[], T]) -> T:
        with self._lock:
            if key in self._cache:
                logger.debug("Using cached value for %s", key)
                return self._cache[key]
            value = compute()
            self._cache[key] = value
            return value

    def resolve_list_option(
        self,
        option_name: str,
        option_value: Optional[str],
        item_type: type[T] = str,  # type: ignore[assignment]
    ) -> tuple[T, ...]:
        """Resolve an option naming a JSON array file.

        Args:
            option_name: Name of the option, used for caching and errors.
            option_value: Path of the JSON file, or None when unset.
            item_type: Type every array element is validated against.

        Returns:
            The file's elements in order, or an empty tuple when the option
            is unset (no file is read).

        Raises:
            ConfigurationError: If the file is missing, unreadable, not
                valid JSON, or not an array of ``item_type``.
        """
        if not option_value:
            return ()

        return self._cached(
            ("list", option_name, option_value, item_type),
            lambda: tuple(
                loader.read_list_from_file(option_name, option_value, item_type)
            ),
        )

    def resolve_mapping_option(
        self,
        option_name: str,
        option_value: Optional[str],
        defaults: Mapping[str, str],
    ) -> Mapping[str, str]:
        """Resolve an option naming a JSON object file merged over defaults.

        Args:
            option_name: Name of the option, used for caching and errors.
            option_value: Path of the JSON file, or None when unset.
            defaults: Built-in entries; file entries override them per key.
                Only the first call per option consults them.

        Returns:
            Read-only merged mapping. ``defaults`` is left untouched.

        Raises:
            ConfigurationError: If the file is missing, unreadable, not
                valid JSON, or not an object of strings.
        """

        def compute() -> Mapping[str, str]:
            overrides: Mapping[str, str] = {}
            if option_value:
                overrides = loader.read_mapping_from_file(option_name, option_value)
            return MappingProxyType(loader.merge_mappings(defaults, overrides))

        return self._cached(("mapping", option_name, option_value), compute)

    def resolve_package_filter(self, option_value: Optional[str]) -> PackageFilter:
        """Resolve the ``--packages-filter`` option.

        A value wrapped in ``/.../`` or ``#...#`` is compiled as a
        case-insensitive regular expression; any other value is the path
        of a JSON array of package ids. The mode is decided on first access.

        Raises:
            ConfigurationError: If the inline pattern does not compile or
                the package list file cannot be loaded.
        """
        if not option_value:
            return NoPackageFilter()

        def compute() -> PackageFilter:
            pattern_text = extract_inline_pattern(option_value)
            if pattern_text is None:
                names = self.resolve_list_option(PACKAGES_FILTER_OPTION, option_value)
                return LiteralPackageFilter.from_names(names)

            try:
                compiled = re.compile(pattern_text, re.IGNORECASE)
            except (re.error, OverflowError, RecursionError) as e:
                raise ConfigurationError(
                    f"Cannot parse {PACKAGES_FILTER_OPTION} regex '{pattern_text}': {e}",
                    option=PACKAGES_FILTER_OPTION,
                    source=pattern_text,
                ) from e
            return PatternPackageFilter(pattern=compiled)

        return self._cached(("package-filter", option_value), compute)

    def resolve_project_filter(self, option_value: Optional[str]) -> tuple[str, ...]:
        """Resolve the ``--projects-filter`` option.

        Returns:
            Filter entries with path separators normalized to "/".
        """
        if not option_value:
            return ()

        return self._cached(
            ("project-filter", option_value),
            lambda: tuple(
                normalize_path(entry)
                for entry in self.resolve_list_option(PROJECTS_FILTER_OPTION, option_value)
            ),
        )

    @property
    def allowed_license_types(self) -> tuple[str, ...]:
        return self.resolve_list_option(
            ALLOWED_LICENSE_TYPES_OPTION, self.options.allowed_license_types_option
        )

    @property
    def manual_information(self) -> tuple[LibraryInfo, ...]:
        return self.resolve_list_option(
            MANUAL_INFORMATION_OPTION, self.options.manual_information_option, LibraryInfo
        )

    @property
    def project_filter(self) -> tuple[str, ...]:
        return self.resolve_project_filter(self.options.projects_filter_option)

    @property
    def package_filter(self) -> PackageFilter:
        return self.resolve_package_filter(self.options.packages_filter_option)

    @property
    def license_to_url_mappings(self) -> Mapping[str, str]:
        return self.resolve_mapping_option(
            LICENSE_TO_URL_MAPPINGS_OPTION,
            self.options.license_to_url_mappings_option,
            DEFAULT_LICENSE_URL_MAPPINGS,
        )
