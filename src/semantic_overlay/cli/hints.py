import asyncio
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from semantic_overlay.cli.tokens import read_document
from semantic_overlay.config import HintMode, OverlayConfig, load_config
from semantic_overlay.core.hints import NBSP
from semantic_overlay.core.overlay import OverlayCoordinator
from semantic_overlay.highlight.treesitter_adapter import TreeSitterCaptureSource
from semantic_overlay.hints.lsp_payload import load_inlay_hints
from semantic_overlay.hints.memory import StaticHintSource

console = Console()


def hints(
    path: Annotated[Path, typer.Argument(help="Path to a source file.")],
    hints_file: Annotated[Path, typer.Option("--hints", help="JSON file with LSP inlay hints for the file.")],
    language: Annotated[str | None, typer.Option(help="Language name (e.g. python, go).")] = None,
    align_column: Annotated[int | None, typer.Option(help="Column to align hints at (0 disables).")] = None,
    minimum_padding: Annotated[int | None, typer.Option(help="Padding for lines past the align column.")] = None,
    mode: Annotated[HintMode, typer.Option(help="Hint mode to render.")] = HintMode.DECOMPILATION,
) -> None:
    """Render a file with its inlay hints as aligned trailing comments."""
    document = read_document(path, language)
    try:
        fragments = load_inlay_hints(hints_file)
        base = load_config()
        config = OverlayConfig(
            align_column=base.align_column if align_column is None else align_column,
            minimum_padding=base.minimum_padding if minimum_padding is None else minimum_padding,
            hint_mode=mode,
        )
    except (ValueError, FileNotFoundError, ValidationError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    source = StaticHintSource()
    source.set_hints(document.uri, fragments, mode)
    coordinator = OverlayCoordinator(TreeSitterCaptureSource(), source)
    decorations = {d.line: d for d in asyncio.run(coordinator.inlay_hints(document, config))}

    for index, line in enumerate(document.lines):
        decoration = decorations.get(index)
        if decoration is None:
            console.print(escape(line), highlight=False)
            continue
        overlay = decoration.text.replace(NBSP, " ")
        console.print(f"{escape(line)}{' ' * decoration.margin}[dim]{escape(overlay)}[/dim]", highlight=False)
