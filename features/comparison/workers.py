"""Background worker thread for reading archive listings."""

import logging
import time

from PyQt6.QtCore import QThread, pyqtSignal

from app.archive_service import ArchiveParseError, ArchiveService

logger = logging.getLogger(__name__)


class LoadArchiveWorker(QThread):
    """Lists an archive without blocking the UI.

    The token identifies the load; the receiver decides whether the result
    is still the latest one.
    """

    finished = pyqtSignal(int, str, list)  # token, archive path, file paths
    error = pyqtSignal(int, str)  # token, message
    progress = pyqtSignal(int, int, float)  # current, total, elapsed_seconds

    def __init__(
        self,
        archive_service: ArchiveService,
        path: str,
        token: int,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._archive_service = archive_service
        self._path = path
        self._token = token
        self._start_time = 0.0

    @property
    def token(self) -> int:
        return self._token

    def run(self) -> None:
        """Execute the listing in the background thread."""
        self._start_time = time.time()
        logger.info("LoadArchiveWorker[%d]: listing %s", self._token, self._path)

        def on_progress(current: int, total: int) -> None:
            self.progress.emit(current, total, time.time() - self._start_time)

        try:
            paths = self._archive_service.list_archive(self._path, progress=on_progress)
        except ArchiveParseError as e:
            logger.exception("LoadArchiveWorker[%d]: listing failed", self._token)
            self.error.emit(self._token, str(e))
            return

        logger.info(
            "LoadArchiveWorker[%d]: %d files in %.2fs",
            self._token,
            len(paths),
            time.time() - self._start_time,
        )
        self.finished.emit(self._token, self._path, paths)
