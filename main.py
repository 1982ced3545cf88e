"""Archive Manifest Checker - PyQt6 archive contents verifier."""

import sys

from PyQt6.QtWidgets import QApplication

from app.logging_config import setup_logging
from app.main_window import MainWindow
from app.settings import APP_NAME, SETTINGS_APPLICATION, SETTINGS_ORGANIZATION
from app.version import get_version


def main() -> int:
    """Application entry point."""
    if "--version" in sys.argv or "-v" in sys.argv:
        print(f"archive-manifest-checker {get_version()}")
        return 0

    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(get_version())
    app.setOrganizationName(SETTINGS_ORGANIZATION)
    app.setApplicationDisplayName(APP_NAME)
    app.setDesktopFileName(SETTINGS_APPLICATION)
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
