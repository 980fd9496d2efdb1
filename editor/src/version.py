"""Application version module.

The VERSION file at the repository root holds the version string. Installed
copies without the file fall back to the distribution metadata.
"""

from pathlib import Path

DISTRIBUTION_NAME = "dilation-sandbox"


def get_version() -> str:
    """Get the application version string (e.g. '1.0')."""
    # editor/src/version.py -> ../../VERSION
    version_file = Path(__file__).resolve().parent.parent.parent / "VERSION"
    try:
        return version_file.read_text().strip()
    except FileNotFoundError:
        pass

    from importlib import metadata
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "0.0"
