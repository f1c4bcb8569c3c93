"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text

from mdfront.domain.metadata import ArticleMetadata, resolve_navigation
from mdfront.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from mdfront.services.result import ServiceResult

_SCALAR_KEYS = (
    "date",
    "author",
    "summary",
    "category",
    "reading_time",
    "thumbnail",
    "primary_series",
    "prev_article",
    "next_article",
)
_LIST_KEYS = ("topics", "tags", "series")
_TOGGLE_KEYS = ("show_references", "show_demo", "show_related", "show_quiz")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="md.ok")
    op = Text(f"  {result.op}", style="md.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="md.key")
    if key == "path":
        v = Text(str(value), style="md.path")
    elif key == "title":
        v = Text(str(value), style="md.title")
    elif key in ("series", "primary_series"):
        v = Text(str(value), style="md.series")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _toggle_line(metadata: dict[str, Any]) -> Text:
    line = Text("  ")
    for key in _TOGGLE_KEYS:
        name = key.removeprefix("show_")
        on = bool(metadata.get(key))
        line.append(f"{name} ", style="md.on" if on else "md.off")
    return line


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="md.error")
    op = Text(f"  {result.op}", style="md.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Parse renderer ────────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a parsed article: metadata fields, navigation, then content."""
    d = result.data
    _status_line(console, result)
    _field(console, "path", d.get("path", ""))
    _field(console, "title", d.get("title", ""))

    metadata = d.get("metadata")
    if metadata is None:
        _field(console, "metadata", "none")
    else:
        for key in _SCALAR_KEYS:
            if metadata.get(key) is not None:
                _field(console, key, metadata[key])
        for key in _LIST_KEYS:
            if metadata.get(key):
                _field(console, key, ", ".join(metadata[key]))
        nav = resolve_navigation(ArticleMetadata.model_validate(metadata))
        if nav is not None:
            links = f"prev={nav.prev or '-'}, next={nav.next or '-'}"
            _field(console, "navigation", f"{nav.series_name or '-'} ({links})")
        for ref in metadata.get("references", []):
            _field(console, "reference", f"{ref['title']} <{ref['url']}>")
        console.print(_toggle_line(metadata))

    content = d.get("content")
    if content:
        console.print()
        console.print(Panel(Text(content.strip()), border_style="dim", expand=False))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_parse,
}
