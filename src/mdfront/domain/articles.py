"""Article helpers used by callers around the parser.

Pure functions over text and paths, no file access.  The parser never
calls these; the file-reading layer uses them to fill in what the front
matter does not say (a display title, the folder-derived series).
"""

from __future__ import annotations

from itertools import islice
from pathlib import PurePath, PurePosixPath

from mdfront.domain.metadata import ArticleMetadata

# The heading is nearly always in the first few lines.
TITLE_SCAN_LINES = 10

_TITLE_PREFIX = "# "


def extract_title(content: str, *, max_lines: int | None = None) -> str | None:
    """Return the text of the first ``# `` heading in *content*.

    Only the first *max_lines* lines are inspected when given.  Returns
    None when no top-level heading is found.
    """
    lines = content.splitlines()
    if max_lines is not None:
        lines = list(islice(lines, max_lines))

    for line in lines:
        stripped = line.strip()
        if stripped.startswith(_TITLE_PREFIX):
            return stripped.removeprefix(_TITLE_PREFIX).strip()
    return None


def series_from_path(path: str | PurePath, base_dir: str | PurePath = "articles") -> str | None:
    """Derive the primary series from an article's folder.

    ``articles/rust/basics/intro.md`` relative to ``articles`` gives
    ``"rust/basics"``.  Returns None for files directly in *base_dir* or
    outside it.
    """
    parent = PurePath(path).parent
    try:
        relative = parent.relative_to(PurePath(base_dir))
    except ValueError:
        return None

    series = PurePosixPath(*relative.parts).as_posix()
    if series in ("", "."):
        return None
    return series


def with_primary_series(metadata: ArticleMetadata, series: str | None) -> ArticleMetadata:
    """Return *metadata* with ``primary_series`` set to *series*.

    A None *series* leaves the record as it is.
    """
    if series is None:
        return metadata
    return metadata.model_copy(update={"primary_series": series})
