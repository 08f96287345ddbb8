"""Small builders shared by the unit tests."""

from collections.abc import Sequence

from semantic_overlay.config import HintMode
from semantic_overlay.core.encoder import decode_tokens
from semantic_overlay.hints.memory import StaticHintSource
from semantic_overlay.models import Capture, HintFragment, LabelPart, ResolvedToken, Span, TextDocument


def cap(name: str, start_line: int, start_col: int, end_line: int, end_col: int) -> Capture:
    return Capture.from_tuple((name, start_line, start_col, end_line, end_col))


def hint(line: int, *parts: str, column: int = 0) -> HintFragment:
    if len(parts) == 1:
        return HintFragment(line=line, column=column, label=parts[0])
    return HintFragment(line=line, column=column, label=[LabelPart(value=p) for p in parts])


def token_tuples(tokens: Sequence[ResolvedToken]) -> list[tuple[int, int, int, str]]:
    return [(t.line, t.start_column, t.length, t.classification.type) for t in tokens]


def decoded_tuples(data: Sequence[int]) -> list[tuple[int, int, int, str]]:
    return token_tuples(decode_tokens(data))


class FakeCaptureSource:
    """Capture source returning a fixed capture list, or raising the given error."""

    def __init__(self, captures: list[Capture] | None = None, error: Exception | None = None) -> None:
        self._captures = captures or []
        self._error = error
        self.calls = 0

    async def captures(self, document: TextDocument) -> list[Capture]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return list(self._captures)


class RecordingHintSource(StaticHintSource):
    """Static hint source that also records every fetch it serves."""

    def __init__(self) -> None:
        super().__init__()
        self.requests: list[tuple[str, HintMode, Span]] = []

    async def fetch_hints(self, document: TextDocument, mode: HintMode, span: Span) -> list[HintFragment]:
        self.requests.append((document.uri, mode, span))
        return await super().fetch_hints(document, mode, span)
