"""NuGet license configuration resolution and report aggregation."""

__version__ = "0.1.0"
