from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from semantic_overlay.config import OverlayConfig
from semantic_overlay.core.encoder import encode_tokens
from semantic_overlay.core.hints import aggregate_hints, build_decorations
from semantic_overlay.core.legend import DEFAULT_TABLE, ClassificationTable
from semantic_overlay.core.ports.captures import CaptureSource
from semantic_overlay.core.ports.hints import HintSource
from semantic_overlay.core.resolver import resolve_captures
from semantic_overlay.models import DecorationSpec, ResolvedToken, TextDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SemanticTokens:
    data: list[int] = field(default_factory=list)
    tokens: list[ResolvedToken] = field(default_factory=list)


class OverlayCoordinator:
    """Runs token and hint refreshes and owns the last rendered decorations per document.

    Each refresh either returns a complete result for the snapshot it was given
    or an empty one; callers apply whatever the most recent call returned.
    """

    def __init__(
        self,
        capture_source: CaptureSource,
        hint_source: HintSource,
        table: ClassificationTable = DEFAULT_TABLE,
    ) -> None:
        self._capture_source = capture_source
        self._hint_source = hint_source
        self._table = table
        self._decorations: dict[str, list[DecorationSpec]] = {}

    @property
    def table(self) -> ClassificationTable:
        return self._table

    async def resolved_tokens(self, document: TextDocument) -> list[ResolvedToken]:
        try:
            captures = await self._capture_source.captures(document)
        except Exception:
            logger.exception("Capture source failed for %s", document.uri)
            return []
        return resolve_captures(captures, document.line_lengths, self._table)

    async def semantic_tokens(self, document: TextDocument) -> SemanticTokens:
        started = time.perf_counter()
        tokens = await self.resolved_tokens(document)
        data = encode_tokens(tokens, self._table.legend)
        logger.info(
            "Semantic tokens for %s took %.1fms (%d tokens)",
            document.uri,
            (time.perf_counter() - started) * 1000,
            len(tokens),
        )
        return SemanticTokens(data=data, tokens=tokens)

    async def inlay_hints(self, document: TextDocument, config: OverlayConfig) -> list[DecorationSpec]:
        if not config.hints_enabled:
            self._decorations[document.uri] = []
            return []

        started = time.perf_counter()
        try:
            fragments = await self._hint_source.fetch_hints(document, config.hint_mode, document.full_span)
        except Exception:
            logger.exception("Failed to fetch inlay hints for %s", document.uri)
            self._decorations[document.uri] = []
            return []

        line_lengths = document.line_lengths
        hints = aggregate_hints(fragments, line_lengths, config.align_column, config.minimum_padding)
        decorations = build_decorations(hints, line_lengths)
        self._decorations[document.uri] = decorations
        logger.info(
            "Inlay hints for %s took %.1fms (%d fragments, %d lines)",
            document.uri,
            (time.perf_counter() - started) * 1000,
            len(fragments),
            len(decorations),
        )
        return decorations

    def decorations(self, uri: str) -> list[DecorationSpec]:
        return list(self._decorations.get(uri, []))

    def close(self, uri: str) -> None:
        self._decorations.pop(uri, None)

    def clear_all(self) -> None:
        self._decorations.clear()

    def __contains__(self, uri: object) -> bool:
        return uri in self._decorations
