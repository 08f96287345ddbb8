from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from semantic_overlay.models import Classification

TOKEN_TYPES: tuple[str, ...] = (
    "comment",
    "keyword",
    "namespace",
    "variable",
    "function",
    "method",
    "decorator",
    "property",
    "string",
    "number",
    "operator",
    "punctuation",
)

TOKEN_MODIFIERS: tuple[str, ...] = ("documentation", "readonly", "declaration")


def _cls(type_: str, *modifiers: str) -> Classification:
    return Classification(type=type_, modifiers=frozenset(modifiers))


# Capture name -> classification, checked by exact match then dotted-prefix fallback.
CAPTURE_CLASSIFICATIONS: tuple[tuple[str, Classification], ...] = (
    ("comment.doc", _cls("comment", "documentation")),
    ("comment", _cls("comment")),
    ("keyword", _cls("keyword")),
    ("module", _cls("namespace")),
    ("constant", _cls("variable", "readonly", "declaration")),
    ("function", _cls("function")),
    ("function.method", _cls("method")),
    ("attribute", _cls("decorator")),
    ("property", _cls("property")),
    ("string.special.symbol", _cls("string")),
    ("number", _cls("number")),
    ("string", _cls("string")),
    ("operator", _cls("operator")),
    ("punctuation.delimiter", _cls("punctuation")),
    ("punctuation.list_marker", _cls("punctuation")),
    ("punctuation.bracket", _cls("punctuation")),
)


@dataclass(frozen=True)
class SemanticTokenLegend:
    """Ordered token type and modifier names the integer wire format indexes into."""

    token_types: tuple[str, ...]
    token_modifiers: tuple[str, ...]

    def type_index(self, token_type: str) -> int:
        try:
            return self.token_types.index(token_type)
        except ValueError:
            raise ValueError(f"Unknown token type '{token_type}'. Legend: {list(self.token_types)}") from None

    def modifier_mask(self, modifiers: Iterable[str]) -> int:
        mask = 0
        for modifier in modifiers:
            if modifier in self.token_modifiers:
                mask |= 1 << self.token_modifiers.index(modifier)
        return mask

    def modifiers_from_mask(self, mask: int) -> frozenset[str]:
        return frozenset(name for bit, name in enumerate(self.token_modifiers) if mask & (1 << bit))


class ClassificationTable:
    """Immutable lookup from dotted capture names to classifications.

    Safe to share between concurrent computations; nothing mutates it after
    construction.
    """

    def __init__(self, entries: Sequence[tuple[str, Classification]], legend: SemanticTokenLegend) -> None:
        by_name: dict[str, Classification] = {}
        for pattern, classification in entries:
            if classification.type not in legend.token_types:
                raise ValueError(f"Capture '{pattern}' maps to unknown token type '{classification.type}'")
            unknown = sorted(set(classification.modifiers) - set(legend.token_modifiers))
            if unknown:
                raise ValueError(f"Capture '{pattern}' uses unknown modifiers {unknown}")
            # First entry for a pattern wins.
            by_name.setdefault(pattern, classification)
        self._by_name = by_name
        self.legend = legend

    def lookup(self, capture_name: str) -> Classification | None:
        parts = capture_name.split(".")
        for i in range(len(parts), 0, -1):
            classification = self._by_name.get(".".join(parts[:i]))
            if classification is not None:
                return classification
        return None

    def __contains__(self, capture_name: object) -> bool:
        return isinstance(capture_name, str) and self.lookup(capture_name) is not None

    def __len__(self) -> int:
        return len(self._by_name)


DEFAULT_LEGEND = SemanticTokenLegend(token_types=TOKEN_TYPES, token_modifiers=TOKEN_MODIFIERS)
DEFAULT_TABLE = ClassificationTable(CAPTURE_CLASSIFICATIONS, DEFAULT_LEGEND)
