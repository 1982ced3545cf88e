"""Persistence of the deny-list text in QSettings."""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QSettings, pyqtSignal

from app.settings import DENY_LIST_KEY, SETTINGS_APPLICATION, SETTINGS_ORGANIZATION

logger = logging.getLogger(__name__)


class DenyListStore(QObject):
    """Reads and writes the deny-list as a single text blob.

    The blob lives under a fixed key. Saves overwrite it wholesale and are
    read back afterwards, so the last save from any session wins.
    """

    saved = pyqtSignal(str)
    save_failed = pyqtSignal(str)  # error message

    def __init__(self, settings: Optional[QSettings] = None, key: str = DENY_LIST_KEY) -> None:
        super().__init__()
        if settings is None:
            settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        self._settings = settings
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def fetch(self) -> Optional[str]:
        """Return the stored text, or None if nothing usable is stored."""
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            logger.error("Failed to read deny list from %s: %s",
                         self._settings.fileName(), status.name)
            return None
        if not self._settings.contains(self._key):
            logger.info("No stored deny list under %s", self._key)
            return None
        value = self._settings.value(self._key)
        if isinstance(value, list):
            # Some backends hand back multi-line values split into lists
            value = "\n".join(str(item) for item in value)
        if not isinstance(value, str):
            logger.error("Ignoring stored deny list of type %s", type(value).__name__)
            return None
        logger.info("Deny list loaded from %s", self._settings.fileName())
        return value

    def save(self, text: str) -> bool:
        """Overwrite the stored text. Returns True on success."""
        logger.info("Saving deny list (%d characters)", len(text))
        self._settings.setValue(self._key, text)
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            message = f"Could not write settings file {self._settings.fileName()} ({status.name})"
            logger.error("Deny list save failed: %s", message)
            self.save_failed.emit(message)
            return False

        stored = self.fetch()
        if stored is None:
            message = "Deny list could not be read back after saving"
            logger.error(message)
            self.save_failed.emit(message)
            return False
        self.saved.emit(stored)
        return True
