"""Path list helpers: top directory handling and normalization."""


def detect_top_directory(paths: list[str]) -> str:
    """Return the first path segment shared by every entry, or "" if none.

    Paths are expected to start with "/", so the segment checked is the one
    right after the leading slash.
    """
    if not paths:
        return ""
    candidate = _segment(paths[0])
    if all(_segment(path) == candidate for path in paths):
        return candidate
    return ""


def strip_top_directory(path: str, top_dir: str) -> str:
    """Remove one leading "/<top_dir>" from path, if present."""
    if not top_dir:
        return path
    prefix = f"/{top_dir}"
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def normalize_for_comparison(paths: list[str]) -> list[str]:
    """Drop one trailing slash from each entry.

    Only a single slash is removed, so "/a//" becomes "/a/".
    """
    return [path[:-1] if path.endswith("/") else path for path in paths]


def parse_path_lines(text: str) -> list[str]:
    """Split newline-delimited text into trimmed, non-blank lines."""
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line]


def _segment(path: str) -> str:
    parts = path.split("/")
    return parts[1] if len(parts) > 1 else ""
