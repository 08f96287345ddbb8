from fastapi import APIRouter, Depends

from semantic_overlay.api.dependencies import get_coordinator, get_hint_source
from semantic_overlay.api.schemas import (
    DiagnosticsFilterRequest,
    DiagnosticsFilterResponse,
    InlayHintsRequest,
    InlayHintsResponse,
)
from semantic_overlay.config import OverlayConfig
from semantic_overlay.core.diagnostics import filter_diagnostics
from semantic_overlay.core.overlay import OverlayCoordinator
from semantic_overlay.hints.lsp_payload import parse_inlay_hints
from semantic_overlay.hints.memory import StaticHintSource
from semantic_overlay.models import TextDocument

router = APIRouter(tags=["inlay-hints"])


@router.post("/inlay-hints", response_model=InlayHintsResponse)
async def inlay_hints(
    body: InlayHintsRequest,
    coordinator: OverlayCoordinator = Depends(get_coordinator),
    hint_source: StaticHintSource = Depends(get_hint_source),
) -> InlayHintsResponse:
    document = TextDocument(uri=body.uri, text=body.text, language="plaintext")
    config = OverlayConfig(
        align_column=body.align_column,
        minimum_padding=body.minimum_padding,
        hint_mode=body.hint_mode,
    )
    hint_source.set_hints(document.uri, parse_inlay_hints(body.hints), config.hint_mode)
    try:
        decorations = await coordinator.inlay_hints(document, config)
    finally:
        hint_source.remove(document.uri)
        coordinator.close(document.uri)
    return InlayHintsResponse(decorations=decorations)


@router.post("/diagnostics/filter", response_model=DiagnosticsFilterResponse)
async def diagnostics_filter(body: DiagnosticsFilterRequest) -> DiagnosticsFilterResponse:
    """Hide decompilation-failure diagnostics unless decompilation hints are shown."""
    return DiagnosticsFilterResponse(diagnostics=filter_diagnostics(body.diagnostics, body.hint_mode))
