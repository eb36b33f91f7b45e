"""Consolidated JSON report of raw metadata, licenses and errors."""
from __future__ import annotations

import json
import logging
import threading
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel

from nuget_license.exceptions import OutputError
from nuget_license.models.report import (
    LicenseValidationError,
    PackageMetadata,
    ValidatedLicense,
)

logger = logging.getLogger(__name__)


class ReportWriter(ABC):
    """Abstract base class for report writers.

    Scan workers feed contributions through ``add_raw`` and
    ``add_validator_results``; the caller invokes ``write`` once at the end
    of the run.
    """

    @abstractmethod
    def add_raw(self, project: str, data: PackageMetadata) -> None:
        """Record raw package metadata found in a project."""

    @abstractmethod
    def add_validator_results(
        self,
        validated_licenses: Iterable[ValidatedLicense],
        errors: Iterable[LicenseValidationError],
    ) -> None:
        """Record the outcome of a license validation."""

    @abstractmethod
    def write(self) -> None:
        """Persist everything recorded so far.

        Raises:
            OutputError: If the report cannot be written.
        """


class WriterState(Enum):
    """Lifecycle of a FileReportWriter."""

    ACCUMULATING = "accumulating"
    WRITTEN = "written"


class FileReportWriter(ReportWriter):
    """Accumulate contributions in memory and write them as one JSON file.

    All methods may be called concurrently from several scan workers. Each
    ``write`` serializes a consistent snapshot of everything added before
    it; additions made afterwards only show up in a later ``write``.
    """

    def __init__(self, file: str | Path) -> None:
        self._file = Path(file)
        self._lock = threading.Lock()
        self._raw: dict[str, list[PackageMetadata]] = {}
        self._validated_licenses: list[ValidatedLicense] = []
        self._errors: list[LicenseValidationError] = []
        self._state = WriterState.ACCUMULATING

    @property
    def file(self) -> Path:
        return self._file

    @property
    def state(self) -> WriterState:
        return self._state

    def add_raw(self, project: str, data: PackageMetadata) -> None:
        with self._lock:
            self._raw.setdefault(project, []).append(data)

    def add_validator_results(
        self,
        validated_licenses: Iterable[ValidatedLicense],
        errors: Iterable[LicenseValidationError],
    ) -> None:
        validated = list(validated_licenses)
        failed = list(errors)
        with self._lock:
            self._validated_licenses.extend(validated)
            self._errors.extend(failed)

    def write(self) -> None:
        with self._lock:
            raw = {project: list(entries) for project, entries in self._raw.items()}
            validated = list(self._validated_licenses)
            errors = list(self._errors)
            self._state = WriterState.WRITTEN

        try:
            content = json.dumps(
                {
                    "Raw": {
                        project: [_to_json(entry) for entry in entries]
                        for project, entries in raw.items()
                    },
                    "Licenses": [_to_json(item) for item in validated],
                    "Errors": [_to_json(item) for item in errors],
                },
                indent=2,
            )
        except (TypeError, ValueError) as e:
            raise OutputError(
                f"Cannot serialize report for '{self._file}': {e}", path=str(self._file)
            ) from e

        try:
            self._file.parent.mkdir(parents=True, exist_ok=True)
            self._file.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputError(
                f"Cannot write report to '{self._file}': {e}", path=str(self._file)
            ) from e

        logger.info(
            "Report written to %s (%d projects, %d licenses, %d errors)",
            self._file,
            len(raw),
            len(validated),
            len(errors),
        )


class NopReportWriter(ReportWriter):
    """Report writer used when reporting is disabled; discards everything."""

    def add_raw(self, project: str, data: PackageMetadata) -> None:
        pass

    def add_validator_results(
        self,
        validated_licenses: Iterable[ValidatedLicense],
        errors: Iterable[LicenseValidationError],
    ) -> None:
        pass

    def write(self) -> None:
        pass


def create_report_writer(file: Optional[str]) -> ReportWriter:
    """Create the report writer for a ``--report-file`` value.

    Args:
        file: Destination path, or None when reporting is disabled.

    Returns:
        FileReportWriter for a set path, NopReportWriter otherwise.
    """
    if file:
        return FileReportWriter(file)
    return NopReportWriter()


def _to_json(item: Any) -> Any:
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json")
    return item
