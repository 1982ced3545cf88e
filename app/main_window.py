"""Main window for Archive Manifest Checker."""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QCheckBox,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from app.archive_service import ArchiveService
from app.settings import (
    APP_NAME,
    ARCHIVE_FILE_FILTER,
    TEXT_FILE_FILTER,
    default_deny_list_text,
)
from app.version import get_version
from features.comparison.comparison_engine import EngineResult
from features.comparison.comparison_service import ComparisonService
from features.comparison.path_normalizer import detect_top_directory, parse_path_lines
from features.comparison.results_panel import ResultsPanel
from features.comparison.workers import LoadArchiveWorker
from features.deny_list.deny_list_panel import DenyListPanel
from features.deny_list.deny_list_store import DenyListStore
from features.expected_list.expected_list_panel import ExpectedListPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, deny_list_store: Optional[DenyListStore] = None) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(900, 600)

        # Create services
        self._archive_service = ArchiveService()
        self._comparison_service = ComparisonService()
        self._deny_list_store = deny_list_store if deny_list_store is not None else DenyListStore()
        self._load_workers: dict[int, LoadArchiveWorker] = {}

        # Setup UI
        self._setup_menu()
        self._setup_toolbar()
        self._setup_central_widget()
        self._setup_statusbar()

        # Connect signals
        self._connect_signals()

        self._load_deny_list()
        self._update_ui_state()

    def _setup_menu(self) -> None:
        """Setup menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        self._open_action = QAction("&Open Archive...", self)
        self._open_action.setShortcut("Ctrl+O")
        self._open_action.triggered.connect(self._on_open_archive)
        file_menu.addAction(self._open_action)

        self._load_list_action = QAction("&Load Expected List...", self)
        self._load_list_action.setShortcut("Ctrl+L")
        self._load_list_action.triggered.connect(self._on_load_expected_list)
        file_menu.addAction(self._load_list_action)

        self._close_action = QAction("&Close Archive", self)
        self._close_action.setShortcut("Ctrl+W")
        self._close_action.triggered.connect(self._on_close_archive)
        file_menu.addAction(self._close_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        self._edit_deny_action = QAction("Edit &NG Files", self)
        self._edit_deny_action.triggered.connect(self._on_edit_deny_list)
        edit_menu.addAction(self._edit_deny_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    def _setup_toolbar(self) -> None:
        """Setup toolbar."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self._open_btn = QAction("Open Archive", self)
        self._open_btn.triggered.connect(self._on_open_archive)
        toolbar.addAction(self._open_btn)

        self._load_list_btn = QAction("Load List", self)
        self._load_list_btn.triggered.connect(self._on_load_expected_list)
        toolbar.addAction(self._load_list_btn)

    def _setup_central_widget(self) -> None:
        """Setup central widget with splitter layout."""
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        layout.addWidget(splitter, 1)

        # Left: inputs
        left_widget = QWidget()
        left_layout = QVBoxLayout(left_widget)
        left_layout.setContentsMargins(0, 0, 0, 0)

        archive_group = QGroupBox("Archive")
        archive_layout = QVBoxLayout(archive_group)
        open_layout = QHBoxLayout()
        self._archive_btn = QPushButton("Select Archive...")
        self._archive_btn.clicked.connect(self._on_open_archive)
        open_layout.addWidget(self._archive_btn)
        self._archive_label = QLabel("No archive loaded")
        open_layout.addWidget(self._archive_label, 1)
        archive_layout.addLayout(open_layout)

        self._include_top_dir_check = QCheckBox("Include top directory")
        archive_layout.addWidget(self._include_top_dir_check)
        self._archive_count_label = QLabel()
        archive_layout.addWidget(self._archive_count_label)
        left_layout.addWidget(archive_group)

        self._expected_panel = ExpectedListPanel()
        left_layout.addWidget(self._expected_panel, 2)

        self._deny_list_panel = DenyListPanel()
        left_layout.addWidget(self._deny_list_panel, 1)

        splitter.addWidget(left_widget)

        # Right: results
        results_group = QGroupBox("Comparison Results")
        results_layout = QVBoxLayout(results_group)
        self._results_panel = ResultsPanel()
        results_layout.addWidget(self._results_panel)
        splitter.addWidget(results_group)

        splitter.setSizes([450, 450])

    def _setup_statusbar(self) -> None:
        """Setup status bar."""
        self._statusbar = self.statusBar()
        self._statusbar.showMessage("Ready")

    def _connect_signals(self) -> None:
        """Connect all signals."""
        # Service signals
        self._archive_service.operation_error.connect(self._on_operation_error)
        self._comparison_service.results_changed.connect(self._on_results_changed)
        self._deny_list_store.saved.connect(self._on_deny_list_saved)
        self._deny_list_store.save_failed.connect(self._on_deny_list_save_failed)

        # Panel signals
        self._include_top_dir_check.toggled.connect(
            self._comparison_service.set_include_top_dir
        )
        self._expected_panel.paths_changed.connect(
            self._comparison_service.set_expected_paths
        )
        self._expected_panel.load_requested.connect(self._on_load_expected_list)
        self._deny_list_panel.save_requested.connect(self._on_deny_list_save)

    def _update_ui_state(self) -> None:
        """Update UI based on current state."""
        has_archive = self._comparison_service.has_archive
        self._close_action.setEnabled(has_archive)
        self._include_top_dir_check.setEnabled(has_archive)

        if has_archive:
            raw = self._comparison_service.raw_archive_paths
            top_dir = detect_top_directory(raw)
            count_text = f"Files in archive: {len(raw)}"
            if top_dir:
                count_text += f" | Top directory: /{top_dir}"
            self._archive_count_label.setText(count_text)
        else:
            self._archive_count_label.setText("")

    def _load_deny_list(self) -> None:
        """Fetch the stored deny-list once at startup."""
        text = self._deny_list_store.fetch()
        if text is None:
            logger.info("Using default deny list")
            text = default_deny_list_text()
        self._apply_deny_list_text(text)

    def _apply_deny_list_text(self, text: str) -> None:
        self._deny_list_panel.set_text(text)
        self._comparison_service.set_deny_patterns(parse_path_lines(text))

    # Menu/Toolbar actions

    def _on_open_archive(self) -> None:
        """Handle open archive action."""
        path, _ = QFileDialog.getOpenFileName(
            self, "Select Archive", "", ARCHIVE_FILE_FILTER
        )
        if path:
            self._load_archive_async(path)

    def _load_archive_async(self, path: str) -> None:
        """List archive in background thread; the newest load wins."""
        token = self._comparison_service.begin_archive_load()
        self._statusbar.showMessage(f"Reading {Path(path).name}...")

        worker = LoadArchiveWorker(self._archive_service, path, token, self)
        worker.progress.connect(self._on_load_progress)
        worker.finished.connect(self._on_load_finished)
        worker.error.connect(self._on_load_error)
        self._load_workers[token] = worker
        worker.start()

    def _on_load_progress(self, current: int, total: int, elapsed: float) -> None:
        """Handle archive listing progress update."""
        self._statusbar.showMessage(f"Reading archive... ({current}/{total}, {elapsed:.1f}s)")

    def _on_load_finished(self, token: int, path: str, paths: list) -> None:
        """Handle archive listing completion."""
        self._release_worker(token)
        if self._comparison_service.finish_archive_load(token, paths, Path(path).name):
            self._archive_label.setText(Path(path).name)
            self._statusbar.showMessage(f"{path} | {len(paths)} files")
            self.setWindowTitle(f"{APP_NAME} - {Path(path).name}")
            self._update_ui_state()

    def _on_load_error(self, token: int, message: str) -> None:
        """Report a failed listing; prior results stay as they were."""
        self._release_worker(token)
        if not self._comparison_service.is_current_load(token):
            logger.info("Ignoring failure of superseded archive load %d: %s", token, message)
            return
        self._statusbar.showMessage("Ready")
        QMessageBox.critical(
            self,
            "Archive Error",
            f"Error occurred while processing the archive.\n\n{message}",
        )

    def _release_worker(self, token: int) -> None:
        worker = self._load_workers.pop(token, None)
        if worker:
            worker.wait()
            worker.deleteLater()

    def _on_load_expected_list(self) -> None:
        """Handle load expected list action."""
        path, _ = QFileDialog.getOpenFileName(
            self, "Select Expected File List", "", TEXT_FILE_FILTER
        )
        if not path:
            return
        paths = self._archive_service.read_path_list(path)
        if paths is not None:
            self._expected_panel.set_paths(paths)

    def _on_close_archive(self) -> None:
        """Handle close archive action."""
        self._comparison_service.clear_archive()
        self._archive_label.setText("No archive loaded")
        self._statusbar.showMessage("Ready")
        self.setWindowTitle(APP_NAME)
        self._update_ui_state()

    def _on_edit_deny_list(self) -> None:
        self._deny_list_panel.start_editing()

    def _on_deny_list_save(self, text: str) -> None:
        """Persist edited deny-list; the store reports back via signals."""
        self._deny_list_store.save(text)

    def _on_deny_list_saved(self, stored_text: str) -> None:
        """Resync with the text read back from the store."""
        self._apply_deny_list_text(stored_text)
        self._statusbar.showMessage("NG file list saved")

    def _on_deny_list_save_failed(self, message: str) -> None:
        self._deny_list_panel.save_failed(message)
        QMessageBox.warning(
            self, "Save Error", f"Could not save the NG file list.\n\n{message}"
        )

    def _on_about(self) -> None:
        """Show about dialog."""
        about_text = (
            f"{APP_NAME} v{get_version()}\n\n"
            "Checks archive contents against an expected file list\n"
            "and flags files matching the NG (deny) list."
        )
        if self._comparison_service.has_archive:
            result = self._comparison_service.result
            about_text += (
                f"\n\nCurrent archive: {self._comparison_service.archive_name}\n"
                f"  Files: {len(result.normalized_archive):,}\n"
                f"  Missing: {len(result.comparison.missing):,}\n"
                f"  Extra: {len(result.comparison.extra):,}"
            )
        QMessageBox.about(self, f"About {APP_NAME}", about_text)

    # Service callbacks

    def _on_results_changed(self, result: EngineResult) -> None:
        """Render freshly computed results."""
        self._results_panel.show_result(
            result,
            perfect_match=self._comparison_service.is_perfect_match,
        )

    def _on_operation_error(self, title: str, message: str) -> None:
        """Handle operation error."""
        QMessageBox.critical(self, title, message)

    def closeEvent(self, event) -> None:
        """Wait for in-flight archive reads before closing."""
        for worker in list(self._load_workers.values()):
            worker.wait()
        self._load_workers.clear()
        super().closeEvent(event)
