from collections.abc import Iterable

from semantic_overlay.config import HintMode
from semantic_overlay.models import HintFragment, Span, TextDocument


class StaticHintSource:
    """Hint source serving pre-fetched fragments keyed by document URI.

    Implements the ``HintSource`` protocol. Fragments are stored per mode; a
    document without fragments for the requested mode yields nothing.
    """

    def __init__(self) -> None:
        self.fragments: dict[tuple[str, HintMode], list[HintFragment]] = {}

    def set_hints(
        self,
        uri: str,
        fragments: Iterable[HintFragment],
        mode: HintMode = HintMode.DECOMPILATION,
    ) -> None:
        self.fragments[(uri, mode)] = list(fragments)

    def remove(self, uri: str) -> None:
        for key in [k for k in self.fragments if k[0] == uri]:
            del self.fragments[key]

    async def fetch_hints(self, document: TextDocument, mode: HintMode, span: Span) -> list[HintFragment]:
        return [
            fragment
            for fragment in self.fragments.get((document.uri, mode), [])
            if span.start.line <= fragment.line <= span.end.line
        ]
