"""Panel for entering the expected file list."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from features.comparison.path_normalizer import parse_path_lines

PLACEHOLDER = (
    "/docs/example/index.html\n"
    "/docs/example/css/style.css\n"
    "/docs/example/img/image.png"
)


class ExpectedListPanel(QGroupBox):
    """Expected file list, loaded from a text file or typed in."""

    paths_changed = pyqtSignal(list)  # parsed paths
    load_requested = pyqtSignal()

    def __init__(self) -> None:
        super().__init__("Expected File List")
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Setup the panel UI."""
        layout = QVBoxLayout(self)

        top_layout = QHBoxLayout()
        self._load_btn = QPushButton("Load List...")
        self._load_btn.clicked.connect(self.load_requested)
        top_layout.addWidget(self._load_btn)
        top_layout.addWidget(QLabel("or enter paths manually, one per line"))
        top_layout.addStretch()
        layout.addLayout(top_layout)

        self._editor = QPlainTextEdit()
        self._editor.setFont(QFont("Monospace"))
        self._editor.setPlaceholderText(PLACEHOLDER)
        self._editor.textChanged.connect(self._on_text_changed)
        layout.addWidget(self._editor)

        self._count_label = QLabel()
        layout.addWidget(self._count_label)

    def set_paths(self, paths: list[str]) -> None:
        """Replace the editor contents with a loaded list."""
        self._editor.setPlainText("\n".join(paths))

    def _on_text_changed(self) -> None:
        paths = parse_path_lines(self._editor.toPlainText())
        self._count_label.setText(f"Expected files: {len(paths)}" if paths else "")
        self.paths_changed.emit(paths)
