"""Panel displaying comparison results and deny-list hits."""

import logging
from enum import Enum

from PyQt6.QtGui import QBrush, QColor
from PyQt6.QtWidgets import (
    QLabel,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from .comparison_engine import EngineResult

logger = logging.getLogger(__name__)


class ResultCategory(Enum):
    """Result groups shown in the tree."""

    MISSING = "missing"
    EXTRA = "extra"
    DENIED_IN_ARCHIVE = "denied_in_archive"
    DENIED_IN_EXPECTED = "denied_in_expected"


class ResultsPanel(QWidget):
    """Shows a perfect-match notice or the discrepancy groups."""

    COLORS = {
        ResultCategory.MISSING: QColor("#5a2d2d"),
        ResultCategory.EXTRA: QColor("#5a4a2d"),
        ResultCategory.DENIED_IN_ARCHIVE: QColor("#5a2d4a"),
        ResultCategory.DENIED_IN_EXPECTED: QColor("#5a2d4a"),
    }

    TITLES = {
        ResultCategory.MISSING: "Missing Files",
        ResultCategory.EXTRA: "Extra Files",
        ResultCategory.DENIED_IN_ARCHIVE: "NG Files in Archive",
        ResultCategory.DENIED_IN_EXPECTED: "NG Files in Expected List",
    }

    def __init__(self) -> None:
        super().__init__()
        self._setup_ui()
        self.clear()

    def _setup_ui(self) -> None:
        """Setup the widget UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._status_label = QLabel()
        self._status_label.setWordWrap(True)
        layout.addWidget(self._status_label)

        self._tree = QTreeWidget()
        self._tree.setHeaderLabels(["Path"])
        self._tree.setIndentation(12)
        layout.addWidget(self._tree)

    def clear(self) -> None:
        self._tree.clear()
        self._set_status("Load an archive and an expected file list to compare.", None)

    def show_result(
        self,
        result: EngineResult,
        perfect_match: bool,
    ) -> None:
        """Render one engine result."""
        self._tree.clear()
        groups = {
            ResultCategory.MISSING: result.comparison.missing,
            ResultCategory.EXTRA: result.comparison.extra,
            ResultCategory.DENIED_IN_ARCHIVE: result.deny_report.in_archive,
            ResultCategory.DENIED_IN_EXPECTED: result.deny_report.in_expected,
        }
        for category, paths in groups.items():
            if paths:
                self._add_group(category, paths)

        if perfect_match:
            self._set_status(
                "Perfect Match! All expected files are present in the archive.",
                "#2d5a2d",
            )
        elif not result.comparison.is_empty:
            self._set_status(
                f"{len(result.comparison.missing)} missing, "
                f"{len(result.comparison.extra)} extra",
                "#5a2d2d",
            )
        else:
            # Nothing differs only because one side is still empty
            self._set_status(
                "Load an archive and an expected file list to compare.", None
            )

        if not result.deny_report.is_empty:
            count = len(result.deny_report.in_archive) + len(result.deny_report.in_expected)
            self._status_label.setText(
                f"{self._status_label.text()}\nWarning: {count} NG file(s) found."
            )

    def _add_group(self, category: ResultCategory, paths: list[str]) -> None:
        logger.debug("Showing %d paths under %s", len(paths), category.value)
        group = QTreeWidgetItem([f"{self.TITLES[category]} ({len(paths)})"])
        brush = QBrush(self.COLORS[category])
        for path in paths:
            child = QTreeWidgetItem([path])
            child.setBackground(0, brush)
            group.addChild(child)
        self._tree.addTopLevelItem(group)
        group.setExpanded(True)

    def _set_status(self, text: str, color: str | None) -> None:
        self._status_label.setText(text)
        if color:
            self._status_label.setStyleSheet(
                f"background-color: {color}; padding: 6px; border-radius: 4px;"
            )
        else:
            self._status_label.setStyleSheet("")
