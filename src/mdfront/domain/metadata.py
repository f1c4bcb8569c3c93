"""Article metadata schema — the typed record behind a ``#####`` block.

Model attributes map 1:1 to TOML keys in the front-matter block.  Every
field carries a code-baked default, so a sparse block only lists what it
overrides (same contract as a sparse config file).

Scalars are strict: a string field never accepts a TOML integer, boolean,
array, or datetime, and a boolean field never accepts a string.  Unknown
keys are ignored.

Sequences are tuples so a decoded record stays immutable end to end.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, StrictBool, StrictStr


class Reference(BaseModel):
    """One entry of the ``[[references]]`` array of tables."""

    model_config = {"frozen": True}

    title: StrictStr
    url: StrictStr
    description: StrictStr | None = None


class SeriesLink(BaseModel):
    """One entry of the ``[[article_series]]`` array of tables.

    ``prev`` and ``next`` are article identifiers within the named series.
    """

    model_config = {"frozen": True}

    name: StrictStr
    prev: StrictStr | None = None
    next: StrictStr | None = None


class ArticleMetadata(BaseModel):
    """Decoded front matter for a single article."""

    model_config = {"frozen": True}

    date: StrictStr | None = None
    author: StrictStr | None = None
    summary: StrictStr | None = None
    topics: tuple[StrictStr, ...] = ()
    tags: tuple[StrictStr, ...] = ()
    thumbnail: StrictStr | None = None
    reading_time: StrictStr | None = None
    category: StrictStr | None = None

    # Derived from the folder structure by the caller, carried as-is here.
    primary_series: StrictStr | None = None
    series: tuple[StrictStr, ...] = ()
    article_series: tuple[SeriesLink, ...] = ()

    # Legacy single-series navigation, superseded by article_series.
    prev_article: StrictStr | None = None
    next_article: StrictStr | None = None

    references: tuple[Reference, ...] = ()

    # References are the baseline tab, so only this toggle defaults on.
    show_references: StrictBool = True
    show_demo: StrictBool = False
    show_related: StrictBool = False
    show_quiz: StrictBool = False


# ---------------------------------------------------------------------------
# Consumer-side navigation policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SeriesNavigation:
    """Previous/next links shown at the bottom of an article."""

    prev: str | None
    next: str | None
    series_name: str | None = None


def resolve_navigation(metadata: ArticleMetadata) -> SeriesNavigation | None:
    """Pick the navigation links a renderer should show.

    The first ``article_series`` entry wins over the legacy
    ``prev_article``/``next_article`` pair; the legacy pair is labelled
    with ``primary_series``.  Returns None when there is nothing to link.
    """
    if metadata.article_series:
        first = metadata.article_series[0]
        nav = SeriesNavigation(prev=first.prev, next=first.next, series_name=first.name)
    else:
        nav = SeriesNavigation(
            prev=metadata.prev_article,
            next=metadata.next_article,
            series_name=metadata.primary_series,
        )

    if nav.prev is None and nav.next is None:
        return None
    return nav
