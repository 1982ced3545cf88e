"""Application-wide settings and defaults."""

import os

APP_NAME = "Archive Manifest Checker"

# QSettings scope
SETTINGS_ORGANIZATION = "ArchiveManifestChecker"
SETTINGS_APPLICATION = "ArchiveManifestChecker"

# Key of the persisted deny-list text
DENY_LIST_KEY = "deny_list/patterns"

DEFAULT_DENY_PATTERNS = (
    ".DS_Store",
    "Thumbs.db",
    "/__MACOSX/",
    "/.git/",
)

ZIP_SUFFIXES = (".zip",)
TAR_SUFFIXES = (".tar", ".tar.gz", ".tgz", ".tar.bz2", ".tbz2", ".tar.xz", ".txz")

ARCHIVE_FILE_FILTER = (
    "Archives (*.zip *.tar *.tar.gz *.tgz *.tar.bz2 *.tbz2 *.tar.xz *.txz);;"
    "All Files (*)"
)
TEXT_FILE_FILTER = "Text Files (*.txt);;All Files (*)"

LOG_LEVEL_ENV = "ARCHIVE_CHECKER_LOG_LEVEL"


def default_deny_list_text() -> str:
    return "\n".join(DEFAULT_DENY_PATTERNS)


def log_level_from_env(default: str = "INFO") -> str:
    """Log level name from the environment, or default."""
    return os.environ.get(LOG_LEVEL_ENV, default).upper()
