from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Iterable
from pathlib import Path
from typing import Any

from watchfiles import Change, awatch

from semantic_overlay.core.languages import EXTENSION_LANGUAGE_MAP

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[set[Path], set[Path]], Coroutine[Any, Any, None]]

_HIGHLIGHTED_EXTENSIONS: frozenset[str] = frozenset(EXTENSION_LANGUAGE_MAP.keys())


def _is_highlighted_file(path: Path) -> bool:
    return path.suffix.lower() in _HIGHLIGHTED_EXTENSIONS


def split_changes(changes: Iterable[tuple[Change, str]]) -> tuple[set[Path], set[Path]]:
    """Return ``(changed, deleted)`` highlighted paths; the last event per path wins."""
    latest: dict[Path, Change] = {}
    for change, raw_path in changes:
        path = Path(raw_path)
        if _is_highlighted_file(path):
            latest[path] = change
    changed = {p for p, c in latest.items() if c != Change.deleted}
    deleted = {p for p, c in latest.items() if c == Change.deleted}
    return changed, deleted


class WatchfilesWatcher:
    """Coalesce file events under a directory into batched refresh callbacks.

    ``watchfiles`` groups bursts of edits within ``debounce_ms`` into one batch,
    so only the newest state of each file triggers a refresh. Implements the
    ``FileWatcherPort`` protocol.
    """

    def __init__(self, directory: str | Path, on_refresh: RefreshCallback, debounce_ms: int = 100) -> None:
        self._directory = Path(directory)
        self._on_refresh = on_refresh
        self._debounce_ms = debounce_ms
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching %s for source changes", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching %s", self._directory)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory, debounce=self._debounce_ms):
            changed, deleted = split_changes(changes)
            if not changed and not deleted:
                continue
            logger.info("Refreshing %d changed and %d deleted file(s)", len(changed), len(deleted))
            try:
                await self._on_refresh(changed, deleted)
            except Exception:
                logger.exception("Refresh callback failed")
