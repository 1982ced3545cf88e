"""Tests for the comparison engine."""

from features.comparison.comparison_engine import (
    ComparisonResult,
    apply_top_directory,
    compare,
    is_perfect_match,
    run_comparison,
)


def test_compare_reports_missing_and_extra():
    result = compare(["/a.txt", "/b.txt"], ["/a.txt", "/c.txt"])
    assert result.missing == ["/c.txt"]
    assert result.extra == ["/b.txt"]


def test_compare_is_reflexive():
    paths = ["/a.txt", "/dir/", "/dir/b.txt"]
    assert compare(paths, paths) == ComparisonResult(missing=[], extra=[])


def test_compare_swapping_roles_swaps_results():
    actual = ["/a", "/b", "/d"]
    expected = ["/a", "/c"]
    forward = compare(actual, expected)
    backward = compare(expected, actual)
    assert forward.missing == backward.extra
    assert forward.extra == backward.missing


def test_compare_ignores_single_trailing_slash():
    result = compare(["/docs/"], ["/docs"])
    assert result.is_empty


def test_compare_is_case_sensitive():
    result = compare(["/A.txt"], ["/a.txt"])
    assert result.missing == ["/a.txt"]
    assert result.extra == ["/A.txt"]


def test_compare_keeps_duplicates_in_output():
    result = compare(["/x.txt"], ["/a.txt", "/x.txt", "/a.txt"])
    assert result.missing == ["/a.txt", "/a.txt"]
    assert result.extra == []


def test_compare_duplicate_found_once_is_not_missing():
    # Per-entry membership: both copies of /a.txt are satisfied by one archive entry
    result = compare(["/a.txt"], ["/a.txt", "/a.txt"])
    assert result.missing == []


def test_compare_empty_inputs():
    assert compare([], []) == ComparisonResult(missing=[], extra=[])


def test_apply_top_directory_strips_when_excluded():
    raw = ["/proj/a.txt", "/proj/b.txt"]
    assert apply_top_directory(raw, include_top_dir=False) == ["/a.txt", "/b.txt"]
    assert apply_top_directory(raw, include_top_dir=True) == raw


def test_apply_top_directory_leaves_mixed_roots():
    raw = ["/proj/a.txt", "/other/b.txt"]
    assert apply_top_directory(raw, include_top_dir=False) == raw


def test_run_comparison_strips_archive_side_only():
    result = run_comparison(
        ["/proj/a.txt", "/proj/b.txt"],
        ["/proj/a.txt", "/proj/c.txt"],
        [],
        include_top_dir=False,
    )
    assert result.normalized_archive == ["/a.txt", "/b.txt"]
    assert result.comparison.missing == ["/proj/a.txt", "/proj/c.txt"]
    assert result.comparison.extra == ["/a.txt", "/b.txt"]


def test_run_comparison_with_top_dir_included():
    result = run_comparison(
        ["/proj/a.txt", "/proj/b.txt"],
        ["/proj/a.txt", "/proj/c.txt"],
        [],
        include_top_dir=True,
    )
    assert result.comparison.missing == ["/proj/c.txt"]
    assert result.comparison.extra == ["/proj/b.txt"]


def test_run_comparison_deny_report():
    result = run_comparison(
        ["/proj/style.scss", "/proj/index.html"],
        ["/index.html", "/main.scss"],
        ["*.scss"],
        include_top_dir=True,
    )
    assert result.deny_report.in_archive == ["/proj/style.scss"]
    assert result.deny_report.in_expected == ["/main.scss"]


def test_run_comparison_deny_report_uses_stripped_archive():
    result = run_comparison(
        ["/proj/docs/a.html", "/proj/b.txt"],
        [],
        ["/docs/"],
        include_top_dir=False,
    )
    assert result.deny_report.in_archive == ["/docs/a.html"]


def test_run_comparison_does_not_mutate_inputs():
    archive = ["/proj/a/"]
    expected = ["/a/"]
    run_comparison(archive, expected, ["*"], include_top_dir=False)
    assert archive == ["/proj/a/"]
    assert expected == ["/a/"]


def test_is_perfect_match_needs_both_sides():
    empty = ComparisonResult()
    assert not is_perfect_match(empty, 0, 0)
    assert not is_perfect_match(empty, 3, 0)
    assert is_perfect_match(empty, 3, 3)
    assert not is_perfect_match(ComparisonResult(missing=["/a"]), 3, 3)
