"""Service layer holding comparison inputs and recomputing results."""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from .comparison_engine import EngineResult, is_perfect_match, run_comparison

logger = logging.getLogger(__name__)


class ComparisonService(QObject):
    """Owns the last comparison inputs and re-runs the engine on every change."""

    results_changed = pyqtSignal(object)  # EngineResult

    def __init__(self) -> None:
        super().__init__()
        self._raw_archive_paths: list[str] = []
        self._expected_paths: list[str] = []
        self._deny_patterns: list[str] = []
        self._include_top_dir = False
        self._archive_name: Optional[str] = None
        self._load_token = 0
        self._result = EngineResult()

    @property
    def raw_archive_paths(self) -> list[str]:
        return list(self._raw_archive_paths)

    @property
    def expected_paths(self) -> list[str]:
        return list(self._expected_paths)

    @property
    def deny_patterns(self) -> list[str]:
        return list(self._deny_patterns)

    @property
    def include_top_dir(self) -> bool:
        return self._include_top_dir

    @property
    def archive_name(self) -> Optional[str]:
        return self._archive_name

    @property
    def result(self) -> EngineResult:
        return self._result

    @property
    def has_archive(self) -> bool:
        return bool(self._raw_archive_paths)

    @property
    def has_expected(self) -> bool:
        return bool(self._expected_paths)

    @property
    def is_perfect_match(self) -> bool:
        return is_perfect_match(
            self._result.comparison,
            len(self._result.normalized_archive),
            len(self._expected_paths),
        )

    def set_archive_paths(self, paths: list[str], name: Optional[str] = None) -> None:
        """Replace the raw archive listing."""
        logger.info("Archive listing replaced: %d files", len(paths))
        self._raw_archive_paths = list(paths)
        self._archive_name = name
        self._recompute()

    def clear_archive(self) -> None:
        """Forget the current archive listing."""
        self._load_token += 1
        self.set_archive_paths([])

    def set_expected_paths(self, paths: list[str]) -> None:
        """Replace the expected manifest."""
        logger.info("Expected list replaced: %d paths", len(paths))
        self._expected_paths = list(paths)
        self._recompute()

    def set_deny_patterns(self, patterns: list[str]) -> None:
        """Replace the deny-list entries."""
        logger.info("Deny list replaced: %d patterns", len(patterns))
        self._deny_patterns = list(patterns)
        self._recompute()

    def set_include_top_dir(self, include: bool) -> None:
        """Switch between keeping and stripping the archive's top directory."""
        if include == self._include_top_dir:
            return
        logger.info("Include top directory: %s", include)
        self._include_top_dir = include
        self._recompute()

    def begin_archive_load(self) -> int:
        """Issue a token for a new archive load; newer tokens supersede older ones."""
        self._load_token += 1
        return self._load_token

    def is_current_load(self, token: int) -> bool:
        """True if token belongs to the most recently started load."""
        return token == self._load_token

    def finish_archive_load(
        self, token: int, paths: list[str], name: Optional[str] = None
    ) -> bool:
        """Apply a finished load unless a newer one has been started since."""
        if not self.is_current_load(token):
            logger.info(
                "Dropping stale archive load %d (latest is %d)", token, self._load_token
            )
            return False
        self.set_archive_paths(paths, name)
        return True

    def _recompute(self) -> None:
        self._result = run_comparison(
            self._raw_archive_paths,
            self._expected_paths,
            self._deny_patterns,
            self._include_top_dir,
        )
        self.results_changed.emit(self._result)
