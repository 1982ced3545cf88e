"""Version information from pyproject.toml."""

import sys
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "archive-manifest-checker"


def _load_version() -> str:
    """Load version from pyproject.toml, then from installed metadata."""
    # When running from PyInstaller bundle
    if getattr(sys, "frozen", False):
        base_path = Path(sys._MEIPASS)  # type: ignore[attr-defined]
    else:
        base_path = Path(__file__).parent.parent

    pyproject_path = base_path / "pyproject.toml"

    if pyproject_path.exists():
        for line in pyproject_path.read_text().splitlines():
            if line.startswith("version"):
                # Parse: version = "0.1.0"
                _, _, value = line.partition("=")
                if value:
                    return value.strip().strip('"').strip("'")

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


_VERSION = _load_version()


def get_version() -> str:
    """Get the application version."""
    return _VERSION
