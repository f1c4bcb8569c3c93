"""ParseService — read one markdown file and parse its front matter.

The parser itself is pure; this is the caller layer that owns file
access and fills in what the front matter does not carry: the
folder-derived ``primary_series`` and a display title.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mdfront.config.models import ParserConfig
from mdfront.domain.articles import extract_title, series_from_path, with_primary_series
from mdfront.domain.frontmatter import assemble_content, decode_metadata, find_metadata_block
from mdfront.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ParseService:
    """Parse markdown files according to a ``[parser]`` config."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()

    def parse_file(
        self,
        path: Path,
        *,
        base_dir: str | Path | None = None,
        include_content: bool = True,
    ) -> ServiceResult:
        """Parse *path* and return its metadata, title, and content.

        A missing or undecodable front-matter block is a warning, not a
        failure.  Read errors fail the result.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ServiceResult(
                ok=False,
                op="parse",
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"File not found: {path}",
                    detail={"path": str(path)},
                ),
            )
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult(
                ok=False,
                op="parse",
                error=ServiceError(
                    code="READ_ERROR",
                    message=f"Cannot read {path}: {exc}",
                    detail={"path": str(path)},
                ),
            )

        warnings: list[str] = []
        block = find_metadata_block(text)
        metadata = decode_metadata(block.metadata_span) if block is not None else None
        content = assemble_content(text, block)

        if block is None:
            warnings.append("No front matter block found")
        elif metadata is None:
            warnings.append("Front matter block could not be decoded")
        else:
            root = Path(base_dir if base_dir is not None else self._config.base_dir)
            series = series_from_path(path.resolve(), root.resolve())
            metadata = with_primary_series(metadata, series)

        title = extract_title(content, max_lines=self._config.title_scan_lines)
        logger.debug("Parsed %s (metadata=%s)", path, metadata is not None)

        return ServiceResult(
            ok=True,
            op="parse",
            data={
                "path": str(path),
                "title": title or path.name,
                "metadata": metadata.model_dump(mode="json") if metadata is not None else None,
                "content": content if include_content else None,
            },
            warnings=warnings,
        )
