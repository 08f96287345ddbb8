"""Tests for reading LSP inlay hint payloads."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from semantic_overlay.hints.lsp_payload import load_inlay_hints, parse_inlay_hint, parse_inlay_hints
from semantic_overlay.models import LabelPart


class TestParseInlayHint:
    def test_string_label(self) -> None:
        fragment = parse_inlay_hint({"position": {"line": 3, "character": 7}, "label": "x = 1", "kind": 1})

        assert (fragment.line, fragment.column, fragment.label) == (3, 7, "x = 1")

    def test_label_parts(self) -> None:
        fragment = parse_inlay_hint(
            {"position": {"line": 0, "character": 0}, "label": [{"value": "a"}, {"value": " b", "tooltip": "t"}]}
        )

        assert fragment.label == [LabelPart(value="a"), LabelPart(value=" b")]
        assert fragment.text == "a b"

    def test_missing_position(self) -> None:
        with pytest.raises(ValueError, match="no position"):
            parse_inlay_hint({"label": "x"})

    def test_fragments_are_immutable(self) -> None:
        fragment = parse_inlay_hint({"position": {"line": 0, "character": 0}, "label": [{"value": "a"}]})

        with pytest.raises(ValidationError):
            fragment.line = 4
        assert isinstance(fragment.label, list)
        with pytest.raises(ValidationError):
            fragment.label[0].value = "b"


class TestParseInlayHints:
    def test_skips_malformed_entries(self) -> None:
        payload = [
            {"position": {"line": 0, "character": 1}, "label": "ok"},
            {"label": "no position"},
            {"position": {"line": "zero", "character": 0}, "label": "bad line"},
            {"position": {"line": 1, "character": 0}},
            {"position": {"line": 2, "character": 0}, "label": "also ok"},
        ]

        fragments = parse_inlay_hints(payload)

        assert [(f.line, f.text) for f in fragments] == [(0, "ok"), (2, "also ok")]

    def test_none_payload(self) -> None:
        assert parse_inlay_hints(None) == []


class TestLoadInlayHints:
    def test_reads_list(self, tmp_path: Path) -> None:
        path = tmp_path / "hints.json"
        path.write_text(json.dumps([{"position": {"line": 1, "character": 2}, "label": "y"}]))

        assert [(f.line, f.column) for f in load_inlay_hints(path)] == [(1, 2)]

    def test_reads_json_rpc_response(self, tmp_path: Path) -> None:
        path = tmp_path / "response.json"
        path.write_text(
            json.dumps({"jsonrpc": "2.0", "id": 4, "result": [{"position": {"line": 0, "character": 0}, "label": "z"}]})
        )

        assert [f.text for f in load_inlay_hints(path)] == ["z"]

    def test_null_result(self, tmp_path: Path) -> None:
        path = tmp_path / "response.json"
        path.write_text(json.dumps({"jsonrpc": "2.0", "id": 4, "result": None}))

        assert load_inlay_hints(path) == []

    def test_rejects_non_list(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"result": {"label": "x"}}))

        with pytest.raises(ValueError, match="Expected a list"):
            load_inlay_hints(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Hints file not found"):
            load_inlay_hints(tmp_path / "absent.json")
