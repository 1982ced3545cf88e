"""Archive-versus-manifest comparison feature module."""

from .comparison_engine import (
    ComparisonResult,
    DenyReport,
    EngineResult,
    compare,
    is_perfect_match,
    run_comparison,
)
from .comparison_service import ComparisonService
from .path_normalizer import (
    detect_top_directory,
    normalize_for_comparison,
    parse_path_lines,
    strip_top_directory,
)
from .pattern_matcher import DenyMatcher, compile_pattern, compile_patterns, filter_paths

__all__ = [
    "ComparisonResult",
    "ComparisonService",
    "DenyMatcher",
    "DenyReport",
    "EngineResult",
    "compare",
    "compile_pattern",
    "compile_patterns",
    "detect_top_directory",
    "filter_paths",
    "is_perfect_match",
    "normalize_for_comparison",
    "parse_path_lines",
    "run_comparison",
    "strip_top_directory",
]
