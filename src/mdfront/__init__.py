"""mdfront — parse ``#####``-delimited TOML front matter out of markdown."""

from mdfront.domain.frontmatter import ParsedMarkdown, parse_markdown_with_metadata
from mdfront.domain.metadata import ArticleMetadata, Reference, SeriesLink

__version__ = "0.1.0"

__all__ = [
    "ArticleMetadata",
    "ParsedMarkdown",
    "Reference",
    "SeriesLink",
    "__version__",
    "parse_markdown_with_metadata",
]
