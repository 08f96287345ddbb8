from typing import Protocol

from semantic_overlay.models import Capture, TextDocument


class CaptureSource(Protocol):
    async def captures(self, document: TextDocument) -> list[Capture]: ...
