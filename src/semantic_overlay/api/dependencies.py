from __future__ import annotations

from collections.abc import AsyncIterator

from semantic_overlay.core.overlay import OverlayCoordinator
from semantic_overlay.highlight.treesitter_adapter import TreeSitterCaptureSource
from semantic_overlay.hints.memory import StaticHintSource

_coordinator: OverlayCoordinator | None = None
_hint_source: StaticHintSource | None = None


def _ensure_coordinator() -> tuple[OverlayCoordinator, StaticHintSource]:
    global _coordinator, _hint_source  # noqa: PLW0603
    if _coordinator is None or _hint_source is None:
        _hint_source = StaticHintSource()
        _coordinator = OverlayCoordinator(TreeSitterCaptureSource(), _hint_source)
    return _coordinator, _hint_source


async def get_coordinator() -> AsyncIterator[OverlayCoordinator]:
    """Yield the process-wide ``OverlayCoordinator``, creating it lazily on first call."""
    coordinator, _ = _ensure_coordinator()
    yield coordinator


async def get_hint_source() -> AsyncIterator[StaticHintSource]:
    _, hint_source = _ensure_coordinator()
    yield hint_source


async def shutdown_coordinator() -> None:
    global _coordinator, _hint_source  # noqa: PLW0603
    if _coordinator is not None:
        _coordinator.clear_all()
    _coordinator = None
    _hint_source = None
