from typing import Protocol

from semantic_overlay.config import HintMode
from semantic_overlay.models import HintFragment, Span, TextDocument


class HintSource(Protocol):
    async def fetch_hints(self, document: TextDocument, mode: HintMode, span: Span) -> list[HintFragment]: ...
