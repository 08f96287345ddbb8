from fastapi import APIRouter, Depends, HTTPException, Query

from semantic_overlay.api.dependencies import get_coordinator
from semantic_overlay.api.schemas import LegendResponse, SemanticTokensRequest, SemanticTokensResponse
from semantic_overlay.core.languages import normalize_language
from semantic_overlay.core.overlay import OverlayCoordinator
from semantic_overlay.models import TextDocument

router = APIRouter(tags=["semantic-tokens"])


@router.get("/legend", response_model=LegendResponse)
async def legend(coordinator: OverlayCoordinator = Depends(get_coordinator)) -> LegendResponse:
    legend = coordinator.table.legend
    return LegendResponse(token_types=list(legend.token_types), token_modifiers=list(legend.token_modifiers))


@router.post("/semantic-tokens", response_model=SemanticTokensResponse)
async def semantic_tokens(
    body: SemanticTokensRequest,
    include_tokens: bool = Query(False, alias="includeTokens"),
    coordinator: OverlayCoordinator = Depends(get_coordinator),
) -> SemanticTokensResponse:
    try:
        language = normalize_language(body.language)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    document = TextDocument(uri=body.uri, text=body.text, language=language)
    result = await coordinator.semantic_tokens(document)
    return SemanticTokensResponse(data=result.data, tokens=result.tokens if include_tokens else None)
