"""Constants for nuget-license."""

# Exit codes
EXIT_SUCCESS = 0  # Command completed
EXIT_ERROR = 2  # Configuration or output error

# Option names, used in error messages
ALLOWED_LICENSE_TYPES_OPTION = "--allowed-license-types"
MANUAL_INFORMATION_OPTION = "--manual-package-information"
LICENSE_TO_URL_MAPPINGS_OPTION = "--licenseurl-to-license-mappings"
PROJECTS_FILTER_OPTION = "--projects-filter"
PACKAGES_FILTER_OPTION = "--packages-filter"

# Bound on concurrently scanned projects
MAX_CONCURRENT_PROJECTS = 8
