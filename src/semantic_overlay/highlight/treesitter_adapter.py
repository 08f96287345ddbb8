from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import cast

from tree_sitter import Query, QueryCursor
from tree_sitter_language_pack import SupportedLanguage, get_language, get_parser

from semantic_overlay.core.languages import normalize_language
from semantic_overlay.models import Capture, Position, Span, TextDocument

logger = logging.getLogger(__name__)

QUERIES_DIR = Path(__file__).parent.parent / "queries"


@lru_cache(maxsize=None)
def load_highlights_query(language: str) -> Query:
    query_path = QUERIES_DIR / f"{language}_highlights.scm"
    if not query_path.exists():
        raise FileNotFoundError(f"Query file not found: {query_path}")
    query_text = query_path.read_text(encoding="utf-8")
    return Query(get_language(cast(SupportedLanguage, language)), query_text)


class _ColumnMapper:
    """Convert tree-sitter byte columns into code point columns, line by line."""

    def __init__(self, source_bytes: bytes) -> None:
        self._lines = source_bytes.split(b"\n")
        self._cache: dict[tuple[int, int], int] = {}

    def column(self, row: int, byte_column: int) -> int:
        key = (row, byte_column)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        line = self._lines[row] if row < len(self._lines) else b""
        column = len(line[:byte_column].decode("utf-8", errors="replace"))
        self._cache[key] = column
        return column


def collect_captures(source: str, language: str) -> list[Capture]:
    """Parse ``source`` and return its highlight captures in discovery order."""
    resolved = normalize_language(language)
    query = load_highlights_query(resolved)
    parser = get_parser(cast(SupportedLanguage, resolved))
    source_bytes = source.encode("utf-8")
    tree = parser.parse(source_bytes)
    mapper = _ColumnMapper(source_bytes)

    captures: list[Capture] = []
    cursor = QueryCursor(query)
    for _, matched_captures in cursor.matches(tree.root_node):
        for name, nodes in matched_captures.items():
            for node in nodes:
                start_row, start_col = node.start_point
                end_row, end_col = node.end_point
                captures.append(
                    Capture(
                        name=name,
                        span=Span(
                            start=Position(line=start_row, column=mapper.column(start_row, start_col)),
                            end=Position(line=end_row, column=mapper.column(end_row, end_col)),
                        ),
                    )
                )
    return captures


class TreeSitterCaptureSource:
    """Capture source backed by the bundled ``<language>_highlights.scm`` queries.

    Implements the ``CaptureSource`` protocol.
    """

    async def captures(self, document: TextDocument) -> list[Capture]:
        captures = collect_captures(document.text, document.language)
        logger.debug("Collected %d captures for %s", len(captures), document.uri)
        return captures
