"""Pure comparison engine for archive listings and expected manifests."""

import logging
from dataclasses import dataclass, field

from .path_normalizer import (
    detect_top_directory,
    normalize_for_comparison,
    strip_top_directory,
)
from .pattern_matcher import compile_patterns, filter_paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Discrepancies between an archive listing and the expected manifest."""

    missing: list[str] = field(default_factory=list)  # expected, not in archive
    extra: list[str] = field(default_factory=list)  # in archive, not expected

    @property
    def is_empty(self) -> bool:
        return not self.missing and not self.extra


@dataclass(frozen=True)
class DenyReport:
    """Deny-list hits on each side of the comparison."""

    in_archive: list[str] = field(default_factory=list)
    in_expected: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.in_archive and not self.in_expected


@dataclass(frozen=True)
class EngineResult:
    """Everything the UI renders after one engine run."""

    normalized_archive: list[str] = field(default_factory=list)
    comparison: ComparisonResult = field(default_factory=ComparisonResult)
    deny_report: DenyReport = field(default_factory=DenyReport)


def compare(actual: list[str], expected: list[str]) -> ComparisonResult:
    """Compute missing and extra paths.

    Membership is checked per entry with exact, case-sensitive equality, so
    duplicates in either list are reported once per occurrence.
    """
    normalized_actual = normalize_for_comparison(actual)
    normalized_expected = normalize_for_comparison(expected)
    actual_set = set(normalized_actual)
    expected_set = set(normalized_expected)

    missing = [path for path in normalized_expected if path not in actual_set]
    extra = [path for path in normalized_actual if path not in expected_set]
    return ComparisonResult(missing=missing, extra=extra)


def apply_top_directory(archive_paths: list[str], include_top_dir: bool) -> list[str]:
    """Derive the archive list to compare from the raw enumeration.

    Always works from the raw list so toggling never strips twice.
    """
    if include_top_dir:
        return list(archive_paths)
    top_dir = detect_top_directory(archive_paths)
    if top_dir:
        logger.debug("Stripping top directory: %s", top_dir)
    return [strip_top_directory(path, top_dir) for path in archive_paths]


def run_comparison(
    archive_paths: list[str],
    expected_paths: list[str],
    deny_patterns: list[str],
    include_top_dir: bool,
) -> EngineResult:
    """Run the full comparison from scratch.

    The expected list is used as given; only the archive side is subject to
    top directory stripping.
    """
    normalized_archive = apply_top_directory(archive_paths, include_top_dir)
    comparison = compare(normalized_archive, expected_paths)

    matchers = compile_patterns(deny_patterns)
    deny_report = DenyReport(
        in_archive=filter_paths(normalized_archive, matchers),
        in_expected=filter_paths(list(expected_paths), matchers),
    )

    logger.info(
        "Comparison complete: %d missing, %d extra, %d denied in archive, "
        "%d denied in expected list",
        len(comparison.missing),
        len(comparison.extra),
        len(deny_report.in_archive),
        len(deny_report.in_expected),
    )
    return EngineResult(
        normalized_archive=normalized_archive,
        comparison=comparison,
        deny_report=deny_report,
    )


def is_perfect_match(
    result: ComparisonResult, archive_count: int, expected_count: int
) -> bool:
    """True when nothing differs and there was something on both sides."""
    return result.is_empty and archive_count > 0 and expected_count > 0
