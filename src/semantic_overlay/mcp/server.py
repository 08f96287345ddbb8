"""FastMCP server exposing semantic-overlay tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from semantic_overlay.config import HintMode, OverlayConfig
from semantic_overlay.core.languages import normalize_language
from semantic_overlay.core.overlay import OverlayCoordinator
from semantic_overlay.core.ports.captures import CaptureSource
from semantic_overlay.highlight.treesitter_adapter import TreeSitterCaptureSource
from semantic_overlay.hints.lsp_payload import parse_inlay_hints
from semantic_overlay.hints.memory import StaticHintSource
from semantic_overlay.models import TextDocument

_SNIPPET_URI = "untitled:mcp-snippet"


def create_mcp_server(capture_source: CaptureSource | None = None) -> FastMCP:
    """Create a FastMCP server; captures come from tree-sitter unless a source is given."""

    hint_source = StaticHintSource()
    overlay = OverlayCoordinator(capture_source or TreeSitterCaptureSource(), hint_source)

    mcp = FastMCP("semantic-overlay", instructions="Compute semantic tokens and aligned inlay hints for code.")

    @mcp.tool()
    async def legend() -> dict[str, list[str]]:
        """Return the token type and modifier names the encoded data indexes into."""
        table_legend = overlay.table.legend
        return {"token_types": list(table_legend.token_types), "token_modifiers": list(table_legend.token_modifiers)}

    @mcp.tool()
    async def semantic_tokens(code: str, language: str) -> list[int]:
        """Return the delta-encoded semantic token data for a code snippet."""
        document = TextDocument(uri=_SNIPPET_URI, text=code, language=normalize_language(language))
        result = await overlay.semantic_tokens(document)
        return result.data

    @mcp.tool()
    async def resolved_tokens(code: str, language: str) -> list[dict[str, Any]]:
        """Return the resolved tokens of a code snippet with their source text."""
        document = TextDocument(uri=_SNIPPET_URI, text=code, language=normalize_language(language))
        lines = document.lines
        return [
            {
                "line": t.line,
                "start_column": t.start_column,
                "length": t.length,
                "type": t.classification.type,
                "modifiers": sorted(t.classification.modifiers),
                "text": lines[t.line][t.start_column : t.end_column],
            }
            for t in await overlay.resolved_tokens(document)
        ]

    @mcp.tool()
    async def inlay_hints(
        code: str,
        hints: list[dict[str, Any]],
        align_column: int = 40,
        minimum_padding: int = 2,
    ) -> list[dict[str, Any]]:
        """Aggregate LSP inlay hints into one aligned trailing comment per line."""
        document = TextDocument(uri=_SNIPPET_URI, text=code, language="plaintext")
        config = OverlayConfig(
            align_column=align_column,
            minimum_padding=minimum_padding,
            hint_mode=HintMode.DECOMPILATION,
        )
        hint_source.set_hints(document.uri, parse_inlay_hints(hints), config.hint_mode)
        try:
            decorations = await overlay.inlay_hints(document, config)
        finally:
            hint_source.remove(document.uri)
            overlay.close(document.uri)
        return [d.model_dump() for d in decorations]

    return mcp
