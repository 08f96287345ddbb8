import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from semantic_overlay.core.languages import detect_language_from_path
from semantic_overlay.core.overlay import OverlayCoordinator
from semantic_overlay.highlight.treesitter_adapter import TreeSitterCaptureSource
from semantic_overlay.hints.memory import StaticHintSource
from semantic_overlay.models import TextDocument
from semantic_overlay.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console()
logger = logging.getLogger(__name__)


async def refresh_paths(coordinator: OverlayCoordinator, changed: set[Path], deleted: set[Path]) -> None:
    for path in sorted(deleted):
        coordinator.close(path.resolve().as_uri())
        console.print(f"[yellow]closed[/yellow] {path}")
    for path in sorted(changed):
        uri = path.resolve().as_uri()
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            coordinator.close(uri)
            console.print(f"[red]unreadable[/red] {path}")
            continue
        document = TextDocument(uri=uri, text=text, language=detect_language_from_path(path))
        result = await coordinator.semantic_tokens(document)
        console.print(f"[green]refreshed[/green] {path} ({len(result.tokens)} tokens)")


def watch(
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")] = Path("."),
    debounce_ms: Annotated[int, typer.Option(help="Coalesce edits arriving within this many milliseconds.")] = 100,
) -> None:
    """Recompute semantic tokens whenever a supported source file changes."""
    coordinator = OverlayCoordinator(TreeSitterCaptureSource(), StaticHintSource())

    async def _on_refresh(changed: set[Path], deleted: set[Path]) -> None:
        await refresh_paths(coordinator, changed, deleted)

    async def _run() -> None:
        watcher = WatchfilesWatcher(directory, _on_refresh, debounce_ms=debounce_ms)
        await watcher.start()
        console.print(f"Watching {directory} (Ctrl+C to stop)")
        try:
            await asyncio.Event().wait()
        finally:
            await watcher.stop()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        logger.info("Watch interrupted")
