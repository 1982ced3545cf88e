"""Panel for viewing and editing the deny-list."""

import logging

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

logger = logging.getLogger(__name__)


class DenyListPanel(QGroupBox):
    """Read-only deny-list view with an explicit edit/save cycle."""

    save_requested = pyqtSignal(str)  # edited text

    def __init__(self) -> None:
        super().__init__("NG Files (Deny List)")
        self._saved_text = ""
        self._editing = False
        self._setup_ui()
        self._update_ui_state()

    def _setup_ui(self) -> None:
        """Setup the panel UI."""
        layout = QVBoxLayout(self)

        hint = QLabel("One pattern per line. \"*\" matches any characters.")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        self._editor = QPlainTextEdit()
        self._editor.setFont(QFont("Monospace"))
        self._editor.setPlaceholderText("*.scss\n/.git/\nThumbs.db")
        layout.addWidget(self._editor)

        btn_layout = QHBoxLayout()
        self._count_label = QLabel()
        btn_layout.addWidget(self._count_label)
        btn_layout.addStretch()
        self._edit_btn = QPushButton("Edit")
        self._edit_btn.clicked.connect(self.start_editing)
        self._cancel_btn = QPushButton("Cancel")
        self._cancel_btn.clicked.connect(self._on_cancel)
        self._save_btn = QPushButton("Save")
        self._save_btn.clicked.connect(self._on_save)
        btn_layout.addWidget(self._edit_btn)
        btn_layout.addWidget(self._cancel_btn)
        btn_layout.addWidget(self._save_btn)
        layout.addLayout(btn_layout)

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def patterns(self) -> list[str]:
        return parse_path_lines(self._saved_text)

    def set_text(self, text: str) -> None:
        """Show text as the current saved deny-list and leave edit mode."""
        self._saved_text = text
        self._editor.setPlainText(text)
        self._editing = False
        self._update_ui_state()

    def start_editing(self) -> None:
        self._editing = True
        self._update_ui_state()
        self._editor.setFocus()

    def save_failed(self, message: str) -> None:
        """Keep the edits on screen so the save can be retried."""
        logger.warning("Deny list edits kept after failed save: %s", message)
        self._editing = True
        self._update_ui_state()

    def _on_save(self) -> None:
        self.save_requested.emit(self._editor.toPlainText())

    def _on_cancel(self) -> None:
        self.set_text(self._saved_text)

    def _update_ui_state(self) -> None:
        self._editor.setReadOnly(not self._editing)
        self._edit_btn.setEnabled(not self._editing)
        self._cancel_btn.setEnabled(self._editing)
        self._save_btn.setEnabled(self._editing)
        self._count_label.setText(f"Patterns: {len(self.patterns)}")
