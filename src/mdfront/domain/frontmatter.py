"""``#####``-delimited TOML front matter — scan, decode, assemble.

A document carries front matter as a TOML block between the first two
occurrences of ``#####``::

    #####
    date = "2025-11-21"
    author = "John Doe"
    #####

    # Article content starts here

Parsing is total: every string input yields a :class:`ParsedMarkdown`.
A missing, unterminated, or malformed block only ever surfaces as
``metadata=None``.  Once a block is found its delimiters are stripped from
the content whether or not the TOML inside decodes.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass

from pydantic import ValidationError

from mdfront.domain.metadata import ArticleMetadata

logger = logging.getLogger(__name__)

DELIMITER = "#####"

# Unicode White_Space; str.strip() alone also drops the \x1c-\x1f separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True)
class MetadataBlock:
    """A located front-matter block and the text around it."""

    metadata_span: str  # TOML text between the delimiters, stripped
    pre_text: str
    post_text: str


@dataclass(frozen=True)
class ParsedMarkdown:
    """Result of :func:`parse_markdown_with_metadata`."""

    metadata: ArticleMetadata | None
    content: str


# ---------------------------------------------------------------------------
# Delimiter scanner
# ---------------------------------------------------------------------------


def find_metadata_block(text: str) -> MetadataBlock | None:
    """Locate the first ``#####`` ... ``#####`` pair in *text*.

    Plain substring search, no line anchoring.  Returns None when either
    delimiter is missing; an unterminated block is plain content.
    """
    first = text.find(DELIMITER)
    if first == -1:
        return None

    span_start = first + len(DELIMITER)
    second = text.find(DELIMITER, span_start)
    if second == -1:
        return None

    return MetadataBlock(
        metadata_span=text[span_start:second].strip(WHITESPACE),
        pre_text=text[:first],
        post_text=text[second + len(DELIMITER) :],
    )


# ---------------------------------------------------------------------------
# Metadata decoder
# ---------------------------------------------------------------------------


def decode_metadata(metadata_span: str) -> ArticleMetadata | None:
    """Decode a TOML front-matter span into :class:`ArticleMetadata`.

    Absent keys take the schema defaults and unknown keys are ignored.
    Returns None on a TOML syntax error or a schema violation, including
    a ``[[references]]``/``[[article_series]]`` entry missing a required
    key.  The decode is all-or-nothing.
    """
    try:
        data = tomllib.loads(metadata_span)
    except (tomllib.TOMLDecodeError, RecursionError) as exc:
        logger.debug("Front matter is not valid TOML: %s", exc)
        return None

    try:
        return ArticleMetadata.model_validate(data)
    except ValidationError as exc:
        logger.debug("Front matter does not match schema: %d error(s)", exc.error_count())
        return None


# ---------------------------------------------------------------------------
# Content assembler
# ---------------------------------------------------------------------------


def assemble_content(raw_document: str, block: MetadataBlock | None) -> str:
    """Return the display content of *raw_document*.

    Without a block the document is returned untouched, not even
    stripped.  With a block, the stripped text before and after it is
    joined with no separator, so words straddling a mid-line block are
    glued together.
    """
    if block is None:
        return raw_document
    return block.pre_text.strip(WHITESPACE) + block.post_text.strip(WHITESPACE)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def parse_markdown_with_metadata(document: str) -> ParsedMarkdown:
    """Split *document* into decoded front matter and display content."""
    block = find_metadata_block(document)
    metadata = decode_metadata(block.metadata_span) if block is not None else None
    return ParsedMarkdown(metadata=metadata, content=assemble_content(document, block))
