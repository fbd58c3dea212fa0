"""Package version, read from the installed distribution."""

from importlib import metadata

DISTRIBUTION_NAME = "tailwind-variants-py"

# Reported when the package is imported from a source tree that was never installed
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION
