"""Command: parse a markdown file's ##### front matter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mdfront.commands._base import MdCommand

if TYPE_CHECKING:
    from mdfront.commands._context import AppContext


@click.command(
    cls=MdCommand,
    examples="""\
  mdfront parse articles/rust/ownership.md
  mdfront parse post.md --base-dir content/posts
  mdfront --json parse articles/intro.md --no-content""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--base-dir",
    default=None,
    help="Articles root used to derive the primary series (default from config).",
)
@click.option("--no-content", is_flag=True, help="Omit the article content from output.")
@click.pass_obj
def parse(app: AppContext, path: Path, base_dir: str | None, no_content: bool) -> None:
    """Parse front matter and content from a markdown file."""
    from mdfront.services.parse import ParseService

    service = ParseService(app.settings.parser)
    app.emit(service.parse_file(path, base_dir=base_dir, include_content=not no_content))
