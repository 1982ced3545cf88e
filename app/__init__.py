"""Application core module."""

from app.archive_service import ArchiveParseError, ArchiveService
from app.logging_config import setup_logging

__all__ = ["ArchiveParseError", "ArchiveService", "setup_logging"]
