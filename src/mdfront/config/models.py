"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mdfront.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    base_dir: str = "articles"
    # None scans the whole article.
    title_scan_lines: int | None = None
