"""Package and project filter types."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional, Union

# An inline package filter is a regular expression wrapped in a matching
# pair of "/" or "#" characters, e.g. "/^System\./" or "#Microsoft.*#".
INLINE_PATTERN_RE = re.compile(r"([/#])(.+)\1")


@dataclass(frozen=True)
class NoPackageFilter:
    """No package filter configured; every package is kept."""

    mode: Literal["none"] = field(default="none", init=False)

    def matches(self, package_id: str) -> bool:
        return False


@dataclass(frozen=True)
class LiteralPackageFilter:
    """Package filter loaded from a JSON list of package ids.

    Matching is case-insensitive, as NuGet package ids are.
    """

    names: frozenset[str]
    mode: Literal["literal"] = field(default="literal", init=False)
    _folded: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_folded", frozenset(name.casefold() for name in self.names))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> LiteralPackageFilter:
        return cls(names=frozenset(names))

    def matches(self, package_id: str) -> bool:
        return package_id.casefold() in self._folded


@dataclass(frozen=True)
class PatternPackageFilter:
    """Package filter given inline as a case-insensitive regular expression."""

    pattern: re.Pattern[str]
    mode: Literal["pattern"] = field(default="pattern", init=False)

    def matches(self, package_id: str) -> bool:
        return self.pattern.search(package_id) is not None


PackageFilter = Union[NoPackageFilter, LiteralPackageFilter, PatternPackageFilter]


def extract_inline_pattern(option_value: str) -> Optional[str]:
    """Return the regular expression text of an inline package filter.

    Args:
        option_value: Raw ``--packages-filter`` value.

    Returns:
        Text between the delimiters if the whole value is wrapped in
        ``/.../`` or ``#...#``, None otherwise.
    """
    match = INLINE_PATTERN_RE.fullmatch(option_value)
    if match is None:
        return None
    return match.group(2)


def normalize_path(path: str) -> str:
    """Convert all path separators to "/" for suffix comparison."""
    return path.replace("\\", "/")


def matches_project_filter(project_path: str, project_filter: Iterable[str]) -> bool:
    """Check whether a project path ends with any project filter entry.

    Args:
        project_path: Path of the project file, in any separator style.
        project_filter: Entries already normalized with ``normalize_path``.

    Returns:
        True if the project should be skipped.
    """
    normalized = normalize_path(project_path)
    return any(normalized.endswith(entry) for entry in project_filter)
