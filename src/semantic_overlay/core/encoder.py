"""Delta encoding of resolved tokens into the LSP semantic token integer array.

Each token becomes ``(deltaLine, deltaStart, length, typeIndex, modifierMask)``.
``deltaStart`` is relative to the previous token's start when both sit on the
same line, absolute otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence

from semantic_overlay.core.legend import DEFAULT_LEGEND, SemanticTokenLegend
from semantic_overlay.models import Classification, ResolvedToken

UINT32_MAX = 2**32 - 1


def encode_tokens(tokens: Sequence[ResolvedToken], legend: SemanticTokenLegend = DEFAULT_LEGEND) -> list[int]:
    data: list[int] = []
    prev_line = 0
    prev_start = 0
    for token in tokens:
        delta_line = token.line - prev_line
        delta_start = token.start_column - prev_start if delta_line == 0 else token.start_column
        data.extend(
            (
                delta_line,
                delta_start,
                min(token.length, UINT32_MAX),
                legend.type_index(token.classification.type),
                legend.modifier_mask(token.classification.modifiers),
            )
        )
        prev_line = token.line
        prev_start = token.start_column
    return data


def decode_tokens(data: Sequence[int], legend: SemanticTokenLegend = DEFAULT_LEGEND) -> list[ResolvedToken]:
    if len(data) % 5 != 0:
        raise ValueError(f"Token data length {len(data)} is not a multiple of 5")

    tokens: list[ResolvedToken] = []
    line = 0
    start = 0
    for i in range(0, len(data), 5):
        delta_line, delta_start, length, type_index, modifier_mask = data[i : i + 5]
        line += delta_line
        start = delta_start if delta_line > 0 else start + delta_start
        if not 0 <= type_index < len(legend.token_types):
            raise ValueError(f"Token type index {type_index} out of range")
        tokens.append(
            ResolvedToken(
                line=line,
                start_column=start,
                length=length,
                classification=Classification(
                    type=legend.token_types[type_index],
                    modifiers=legend.modifiers_from_mask(modifier_mask),
                ),
            )
        )
    return tokens
