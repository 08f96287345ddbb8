"""Configuration commands.

Settings live in the environment; the toggles print the variable to export
rather than writing anything.
"""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from semantic_overlay.config import (
    OverlayConfig,
    load_config,
    toggle_hint_descriptions,
    toggle_hints,
    with_align_column,
)

config_app = typer.Typer(help="Show and change overlay settings.")
console = Console()


def _current() -> OverlayConfig:
    try:
        return load_config()
    except (ValueError, ValidationError) as exc:
        console.print(f"[red]Invalid configuration: {exc}[/red]")
        raise typer.Exit(1) from exc


@config_app.command("show")
def show() -> None:
    """Print the effective configuration."""
    config = _current()
    console.print(f"SEMANTIC_OVERLAY_ALIGN_COLUMN={config.align_column}")
    console.print(f"SEMANTIC_OVERLAY_MINIMUM_PADDING={config.minimum_padding}")
    console.print(f"SEMANTIC_OVERLAY_HINT_MODE={config.hint_mode.value}")


@config_app.command("toggle-hints")
def toggle_hints_command() -> None:
    """Switch inlay hints between off and decompilation."""
    mode = toggle_hints(_current().hint_mode)
    console.print(f"SEMANTIC_OVERLAY_HINT_MODE={mode.value}")


@config_app.command("toggle-descriptions")
def toggle_descriptions_command() -> None:
    """Switch inlay hints between decompilation and description."""
    mode = toggle_hint_descriptions(_current().hint_mode)
    console.print(f"SEMANTIC_OVERLAY_HINT_MODE={mode.value}")


@config_app.command("set-align-column")
def set_align_column(
    value: Annotated[int, typer.Argument(help="Column to align hints at (0 disables alignment).")],
) -> None:
    """Validate a new align column."""
    try:
        config = with_align_column(_current(), value)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    console.print(f"SEMANTIC_OVERLAY_ALIGN_COLUMN={config.align_column}")
