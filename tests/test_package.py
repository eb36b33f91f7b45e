"""Basic package tests for nuget-license."""


def test_package_imports() -> None:
    """Test that the main package can be imported."""
    import nuget_license

    assert nuget_license.__version__ == "0.1.0"


def test_cli_imports() -> None:
    """Test that the CLI module can be imported."""
    from nuget_license.cli import main

    assert main is not None


def test_subpackages_import() -> None:
    """Test that all subpackages can be imported."""
    import nuget_license.analysis
    import nuget_license.config
    import nuget_license.models
    import nuget_license.output
    import nuget_license.sources

    assert nuget_license.analysis is not None
    assert nuget_license.config is not None
    assert nuget_license.models is not None
    assert nuget_license.output is not None
    assert nuget_license.sources is not None
