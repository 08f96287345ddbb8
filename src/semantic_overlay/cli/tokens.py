import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from semantic_overlay.core.languages import resolve_language
from semantic_overlay.core.legend import DEFAULT_LEGEND
from semantic_overlay.core.overlay import OverlayCoordinator, SemanticTokens
from semantic_overlay.highlight.treesitter_adapter import TreeSitterCaptureSource
from semantic_overlay.hints.memory import StaticHintSource
from semantic_overlay.models import TextDocument

console = Console()


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def read_document(path: Path, language: str | None) -> TextDocument:
    try:
        resolved_language = resolve_language(language, path)
        text = path.read_text(encoding="utf-8")
    except (ValueError, FileNotFoundError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    return TextDocument(uri=path.resolve().as_uri(), text=text, language=resolved_language)


def _get_coordinator() -> OverlayCoordinator:
    return OverlayCoordinator(TreeSitterCaptureSource(), StaticHintSource())


def legend() -> None:
    """Show the token type and modifier legend the integer data indexes into."""
    rows = [("type", i, name) for i, name in enumerate(DEFAULT_LEGEND.token_types)]
    rows += [("modifier", 1 << i, name) for i, name in enumerate(DEFAULT_LEGEND.token_modifiers)]
    _render_table(["kind", "index/bit", "name"], rows)


def tokens(
    path: Annotated[Path, typer.Argument(help="Path to a source file.")],
    language: Annotated[str | None, typer.Option(help="Language name (e.g. python, go).")] = None,
    raw: Annotated[bool, typer.Option("--raw", help="Print the delta-encoded integer array.")] = False,
) -> None:
    """Resolve semantic tokens for a source file."""
    document = read_document(path, language)
    coordinator = _get_coordinator()

    result: SemanticTokens = asyncio.run(coordinator.semantic_tokens(document))
    if raw:
        console.print(" ".join(str(v) for v in result.data))
        return

    lines = document.lines
    rows = [
        (
            t.line,
            t.start_column,
            t.length,
            t.classification.type,
            ",".join(sorted(t.classification.modifiers)),
            escape(lines[t.line][t.start_column : t.end_column]),
        )
        for t in result.tokens
    ]
    _render_table(["line", "column", "length", "type", "modifiers", "text"], rows)
