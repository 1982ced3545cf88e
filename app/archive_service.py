"""Service layer for reading archive listings and text path lists."""

import logging
import tarfile
import zipfile
from pathlib import Path
from typing import Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from app.settings import TAR_SUFFIXES, ZIP_SUFFIXES
from features.comparison.path_normalizer import parse_path_lines

# Type alias for progress callback
ProgressCallback = Callable[[int, int], None]


class ArchiveParseError(Exception):
    """Raised when an archive or text file cannot be read."""
    pass


logger = logging.getLogger(__name__)


class ArchiveService(QObject):
    """Enumerates archive entries and decodes manifest text files."""

    # Signals
    operation_error = pyqtSignal(str, str)  # title, message

    def list_archive(
        self,
        path: str,
        progress: Optional[ProgressCallback] = None,
    ) -> list[str]:
        """Return the archive's file entries, each prefixed with "/".

        Directory entries are skipped. Raises ArchiveParseError if the file
        cannot be opened or is not a supported archive.

        Args:
            path: Path to the archive on disk
            progress: Optional callback(entries_read, total_entries)
        """
        logger.info("Listing archive: %s", path)
        archive_path = Path(path)
        try:
            if self._is_tar(archive_path):
                entries = self._read_tar_entries(archive_path)
            elif self._is_zip(archive_path):
                entries = self._read_zip_entries(archive_path)
            else:
                raise ArchiveParseError(f"Unsupported archive type: {archive_path.name}")
        except ArchiveParseError:
            raise
        except (OSError, zipfile.BadZipFile, tarfile.TarError, EOFError) as e:
            raise ArchiveParseError(f"Cannot read archive {archive_path.name}: {e}") from e

        files: list[str] = []
        total = len(entries)
        for index, (name, is_dir) in enumerate(entries, start=1):
            if not is_dir:
                files.append("/" + name)
            if progress:
                progress(index, total)

        logger.info("Archive listed: %d files, %d entries", len(files), total)
        return files

    def read_text_file(self, path: str) -> str:
        """Decode a text file as UTF-8 (a leading BOM is dropped)."""
        logger.info("Reading text file: %s", path)
        try:
            return Path(path).read_bytes().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ArchiveParseError(f"Cannot read text file {Path(path).name}: {e}") from e

    def read_path_list(self, path: str) -> Optional[list[str]]:
        """Read a newline-delimited path list. Returns None on failure."""
        try:
            paths = parse_path_lines(self.read_text_file(path))
        except ArchiveParseError as e:
            logger.exception("Failed to read path list: %s", path)
            self.operation_error.emit("Text File Error", str(e))
            return None
        logger.info("Read %d paths from %s", len(paths), path)
        return paths

    def _is_zip(self, path: Path) -> bool:
        if path.suffix.lower() in ZIP_SUFFIXES:
            return True
        return zipfile.is_zipfile(path)

    def _is_tar(self, path: Path) -> bool:
        name = path.name.lower()
        return any(name.endswith(suffix) for suffix in TAR_SUFFIXES)

    def _read_zip_entries(self, path: Path) -> list[tuple[str, bool]]:
        with zipfile.ZipFile(path) as archive:
            return [(info.filename, info.is_dir()) for info in archive.infolist()]

    def _read_tar_entries(self, path: Path) -> list[tuple[str, bool]]:
        with tarfile.open(path, "r:*") as archive:
            return [(member.name, member.isdir()) for member in archive.getmembers()]
