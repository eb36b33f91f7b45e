"""CLI entry point for nuget-license."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Callable

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from nuget_license import __version__
from nuget_license.analysis.filtering import filter_projects
from nuget_license.analysis.licenses import is_license_allowed, license_from_url
from nuget_license.config.filters import (
    LiteralPackageFilter,
    PackageFilter,
    PatternPackageFilter,
)
from nuget_license.config.resolver import ConfigurationResolver
from nuget_license.constants import EXIT_ERROR, EXIT_SUCCESS
from nuget_license.exceptions import NuGetLicenseError
from nuget_license.models.options import LogLevel, PackageOptions

# Module-level console for consistent output
_console = Console()
# Separate console for errors and log records (writes to stderr)
_error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _filter_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the file-backed filter options shared by all commands."""
    func = click.option(
        "--packages-filter",
        "packages_filter_option",
        default=None,
        help="Simple JSON file of a text array of packages to skip, or a regular "
        "expression defined between two forward slashes or two hashes.",
    )(func)
    func = click.option(
        "--projects-filter",
        "projects_filter_option",
        default=None,
        help="Simple JSON file of a text array of projects to skip. "
        "Supports ends-with matching such as 'Tests.csproj'.",
    )(func)
    func = click.option(
        "--licenseurl-to-license-mappings",
        "license_to_url_mappings_option",
        default=None,
        help="Simple JSON file of a URL to license dictionary to override "
        "default mappings.",
    )(func)
    func = click.option(
        "--manual-package-information",
        "manual_information_option",
        default=None,
        help="Simple JSON file of an array of LibraryInfo objects for manually "
        "determined packages.",
    )(func)
    func = click.option(
        "--allowed-license-types",
        "allowed_license_types_option",
        default=None,
        help="Simple JSON file of a text array of allowable licenses. "
        "If no file is given, all are assumed allowed.",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    default=LogLevel.ERROR.value,
    help="Sets log level for output display (default: error).",
)
@click.pass_context
def main(ctx: click.Context, log_level: str) -> None:
    """NuGet License Utility - Resolve license options and filters.

    \b
    Examples:
        nuget-license config --allowed-license-types allowed.json
        nuget-license config --packages-filter "/^System\\./" --format json
        nuget-license filter --packages-filter "#^Microsoft#" Newtonsoft.Json
        nuget-license check-license https://opensource.org/licenses/MIT
    """
    level = LogLevel(log_level.lower())
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = level
    _configure_logging(level)


@main.command()
@_filter_options
@click.option("--include-project-file", is_flag=True, default=False,
              help="Adds project file path to information when enabled.")
@click.option("--output", "-o", "text_output", is_flag=True, default=False,
              help="Saves as text file (licenses.txt).")
@click.option("--outfile", "output_file_name", default=None, help="Output filename.")
@click.option("--output-directory", "-f", "output_directory", default=None,
              help="Output directory.")
@click.option("--input", "-i", "project_directory", default=None,
              help="Folder, project file, solution file or JSON project list to scan.")
@click.option("--unique", "-u", "unique_only", is_flag=True, default=False,
              help="Unique licenses list by Id/Version.")
@click.option("--print/--no-print", "print_licenses", default=True,
              help="Print licenses.")
@click.option("--json", "-j", "json_output", is_flag=True, default=False,
              help="Saves licenses list in a JSON file (licenses.json).")
@click.option("--md", "-m", "markdown_output", is_flag=True, default=False,
              help="Saves the licenses list to a markdown file (licenses.md).")
@click.option("--export-license-texts", "-e", is_flag=True, default=False,
              help="Exports the raw license texts.")
@click.option("--include-transitive", "-t", is_flag=True, default=False,
              help="Include distinct transitive package licenses per project file.")
@click.option("--convert-html-to-text", "-c", is_flag=True, default=False,
              help="Convert HTML licenses to plain text.")
@click.option("--ignore-ssl-certificate-errors", is_flag=True, default=False,
              help="Ignore SSL certificate errors.")
@click.option("--use-project-assets-json", is_flag=True, default=False,
              help="Use project.assets.json as the package source. Requires -t.")
@click.option("--timeout", type=int, default=10, help="HTTP timeout in seconds.")
@click.option("--proxy-url", default=None, help="Proxy server URL.")
@click.option("--proxy-system-auth", is_flag=True, default=False,
              help="Use the system credentials for proxy authentication.")
@click.option("--report-file", default=None,
              help="Write raw metadata, licenses and errors to this JSON file.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for the resolved configuration (default: terminal).",
)
@click.pass_context
def config(ctx: click.Context, output_format: str, **fields: Any) -> None:
    """Resolve all options and show the resulting configuration.

    Every file-backed option is loaded and validated, so this command
    reports configuration problems before a scan is started. The scan and
    output flags are validated and recorded only; this command does not
    scan projects or write reports. Scans run through
    nuget_license.scanner.scan_projects and reports through
    nuget_license.output.report_writer.create_report_writer.

    \b
    Examples:
        nuget-license config --allowed-license-types allowed.json
        nuget-license config --packages-filter packages.json --format json
    """
    options = _build_options(ctx, **fields)

    try:
        resolved = _resolve_all(ConfigurationResolver(options))
    except NuGetLicenseError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)

    if output_format.lower() == "json":
        click.echo(json.dumps(resolved, indent=2))
    else:
        _display_resolved(resolved)
    sys.exit(EXIT_SUCCESS)


@main.command(name="filter")
@_filter_options
@click.option(
    "--project",
    "projects",
    multiple=True,
    help="Project file path to test against the projects filter (repeatable).",
)
@click.argument("packages", nargs=-1)
@click.pass_context
def filter_command(
    ctx: click.Context,
    projects: tuple[str, ...],
    packages: tuple[str, ...],
    **fields: Any,
) -> None:
    """Show which projects and packages the filters would skip.

    \b
    Examples:
        nuget-license filter --packages-filter "/^System\\./" System.Memory Serilog
        nuget-license filter --projects-filter skip.json --project src/App.Tests.csproj
    """
    resolver = ConfigurationResolver(_build_options(ctx, **fields))

    try:
        project_result = filter_projects(projects, resolver.project_filter)
        package_filter = resolver.package_filter
    except NuGetLicenseError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)

    for project in projects:
        status = "skip" if project in project_result.skipped else "keep"
        click.echo(f"{status}\tproject\t{project}")
    for package_id in packages:
        status = "skip" if package_filter.matches(package_id) else "keep"
        click.echo(f"{status}\tpackage\t{package_id}")
    sys.exit(EXIT_SUCCESS)


@main.command(name="check-license")
@_filter_options
@click.argument("licenses", nargs=-1, required=True)
@click.pass_context
def check_license(ctx: click.Context, licenses: tuple[str, ...], **fields: Any) -> None:
    """Check licenses or license URLs against the allowed license types.

    URLs are mapped to license identifiers using the default mappings and
    the --licenseurl-to-license-mappings file.

    \b
    Examples:
        nuget-license check-license --allowed-license-types allowed.json MIT
        nuget-license check-license https://licenses.nuget.org/Apache-2.0
    """
    resolver = ConfigurationResolver(_build_options(ctx, **fields))

    try:
        allowed = resolver.allowed_license_types
        mappings = resolver.license_to_url_mappings
    except NuGetLicenseError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)

    for value in licenses:
        license_id = license_from_url(value, mappings) or value
        status = "allowed" if is_license_allowed(license_id, allowed) else "denied"
        click.echo(f"{status}\t{license_id}\t{value}")
    sys.exit(EXIT_SUCCESS)


def _build_options(ctx: click.Context, **fields: Any) -> PackageOptions:
    """Build PackageOptions from parsed flags.

    Raises:
        click.UsageError: If the flag combination is invalid.
    """
    log_level = (ctx.obj or {}).get("log_level", LogLevel.ERROR)
    try:
        return PackageOptions(log_level=log_level, **fields)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise click.UsageError(messages) from e


def _resolve_all(resolver: ConfigurationResolver) -> dict[str, Any]:
    """Resolve every file-backed option of a resolver.

    Raises:
        ConfigurationError: If any option cannot be resolved.
    """
    return {
        "allowed_license_types": list(resolver.allowed_license_types),
        "manual_information": [
            info.model_dump(mode="json", by_alias=True, exclude_none=True)
            for info in resolver.manual_information
        ],
        "project_filter": list(resolver.project_filter),
        "package_filter": _describe_package_filter(resolver.package_filter),
        "license_to_url_mappings": dict(resolver.license_to_url_mappings),
        "report_file": resolver.options.report_file,
    }


def _describe_package_filter(package_filter: PackageFilter) -> dict[str, Any]:
    if isinstance(package_filter, PatternPackageFilter):
        return {"mode": package_filter.mode, "pattern": package_filter.pattern.pattern}
    if isinstance(package_filter, LiteralPackageFilter):
        return {"mode": package_filter.mode, "names": sorted(package_filter.names)}
    return {"mode": package_filter.mode}


def _display_resolved(resolved: dict[str, Any]) -> None:
    """Display the resolved configuration as a Rich table."""
    table = Table(title="Resolved Configuration")
    table.add_column("Option", style="cyan")
    table.add_column("Value")

    table.add_row("Allowed license types", ", ".join(resolved["allowed_license_types"]) or "(all)")
    table.add_row(
        "Manual package information",
        ", ".join(info["PackageName"] for info in resolved["manual_information"]) or "(none)",
    )
    table.add_row("Projects filter", ", ".join(resolved["project_filter"]) or "(none)")

    package_filter = resolved["package_filter"]
    if package_filter["mode"] == "pattern":
        package_value = f"/{package_filter['pattern']}/ (case-insensitive)"
    elif package_filter["mode"] == "literal":
        package_value = ", ".join(package_filter["names"]) or "(empty list)"
    else:
        package_value = "(none)"
    table.add_row("Packages filter", package_value)
    table.add_row(
        "License URL mappings", f"{len(resolved['license_to_url_mappings'])} entries"
    )
    table.add_row("Report file", resolved["report_file"] or "(disabled)")

    _console.print(table)


def _configure_logging(level: LogLevel) -> None:
    """Send log records to stderr through Rich at the given threshold."""
    logging.basicConfig(
        level=level.logging_level,
        format="%(message)s",
        handlers=[RichHandler(console=_error_console, show_path=False)],
        force=True,
    )


def _display_error(error: NuGetLicenseError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    logger.debug("Command failed", exc_info=error)
    _error_console.print(f"[red bold]Error: {error_type}: {escape(str(error))}[/red bold]")


if __name__ == "__main__":
    main()
