"""Output writers for nuget-license."""

from nuget_license.output.report_writer import (
    FileReportWriter,
    NopReportWriter,
    ReportWriter,
    WriterState,
    create_report_writer,
)

__all__ = [
    "FileReportWriter",
    "NopReportWriter",
    "ReportWriter",
    "WriterState",
    "create_report_writer",
]
