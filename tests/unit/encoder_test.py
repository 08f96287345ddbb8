"""Tests for delta encoding of resolved tokens."""

import pytest

from semantic_overlay.core.encoder import UINT32_MAX, decode_tokens, encode_tokens
from semantic_overlay.core.legend import DEFAULT_LEGEND
from semantic_overlay.core.resolver import resolve_captures
from semantic_overlay.models import Classification, ResolvedToken
from tests.helpers import cap


def _token(line: int, start: int, length: int, type_: str, *modifiers: str) -> ResolvedToken:
    return ResolvedToken(
        line=line,
        start_column=start,
        length=length,
        classification=Classification(type=type_, modifiers=frozenset(modifiers)),
    )


class TestEncodeTokens:
    def test_empty_list_encodes_to_empty_data(self) -> None:
        assert encode_tokens([]) == []

    def test_same_line_uses_relative_start(self) -> None:
        tokens = [_token(0, 0, 5, "keyword"), _token(0, 6, 3, "number")]

        assert encode_tokens(tokens) == [0, 0, 5, 1, 0, 0, 6, 3, 9, 0]

    def test_new_line_uses_absolute_start(self) -> None:
        tokens = [_token(1, 8, 2, "keyword"), _token(3, 4, 2, "comment", "documentation")]

        assert encode_tokens(tokens) == [1, 8, 2, 1, 0, 2, 4, 2, 0, 1]

    def test_modifier_bits_are_ored(self) -> None:
        data = encode_tokens([_token(0, 0, 4, "variable", "readonly", "declaration")])

        assert data == [0, 0, 4, 3, 6]

    def test_oversized_length_is_clamped(self) -> None:
        data = encode_tokens([_token(0, 0, UINT32_MAX + 10, "comment")])

        assert data[2] == UINT32_MAX

    def test_unknown_type_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            encode_tokens([_token(0, 0, 1, "macro")])


class TestDecodeTokens:
    def test_round_trip_reproduces_resolved_tokens(self) -> None:
        captures = [
            cap("comment.doc", 0, 0, 1, 3),
            cap("keyword", 2, 0, 2, 5),
            cap("constant", 2, 6, 2, 9),
            cap("function.method", 4, 2, 4, 8),
            cap("punctuation.bracket", 4, 8, 4, 9),
        ]
        tokens = resolve_captures(captures, [10, 10, 12, 0, 12])

        assert decode_tokens(encode_tokens(tokens)) == tokens

    def test_decodes_known_data(self) -> None:
        tokens = decode_tokens([0, 2, 3, 4, 0, 1, 0, 4, 8, 0, 0, 5, 1, 10, 0])

        assert [(t.line, t.start_column, t.length, t.classification.type) for t in tokens] == [
            (0, 2, 3, "function"),
            (1, 0, 4, "string"),
            (1, 5, 1, "operator"),
        ]

    def test_decodes_modifier_mask(self) -> None:
        tokens = decode_tokens([0, 0, 3, 3, 6], DEFAULT_LEGEND)

        assert tokens[0].classification.modifiers == frozenset({"readonly", "declaration"})

    def test_rejects_truncated_data(self) -> None:
        with pytest.raises(ValueError, match="multiple of 5"):
            decode_tokens([0, 0, 1, 1])

    def test_rejects_out_of_range_type_index(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            decode_tokens([0, 0, 1, 99, 0])
