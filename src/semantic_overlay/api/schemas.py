from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from semantic_overlay.config import HintMode
from semantic_overlay.models import DecorationSpec, ResolvedToken


class HealthResponse(BaseModel):
    status: str = "ok"


class LegendResponse(BaseModel):
    token_types: list[str]
    token_modifiers: list[str]


class SemanticTokensRequest(BaseModel):
    text: str
    language: str
    uri: str = "untitled:document"


class SemanticTokensResponse(BaseModel):
    data: list[int]
    tokens: list[ResolvedToken] | None = None


class InlayHintsRequest(BaseModel):
    """Body of POST /inlay-hints: document text plus the raw LSP inlay hint result."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    uri: str = "untitled:document"
    hints: list[dict[str, Any]] = Field(default_factory=list)
    align_column: int = Field(40, ge=0, alias="alignColumn")
    minimum_padding: int = Field(2, ge=0, alias="minimumPadding")
    hint_mode: HintMode = Field(HintMode.DECOMPILATION, alias="hintMode")


class InlayHintsResponse(BaseModel):
    decorations: list[DecorationSpec]


class DiagnosticsFilterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    diagnostics: list[dict[str, Any]] = Field(default_factory=list)
    hint_mode: HintMode = Field(HintMode.NONE, alias="hintMode")


class DiagnosticsFilterResponse(BaseModel):
    diagnostics: list[dict[str, Any]]
