"""Conversion of LSP ``InlayHint`` payloads into hint fragments."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from semantic_overlay.models import HintFragment

logger = logging.getLogger(__name__)


def parse_inlay_hint(hint: dict[str, Any]) -> HintFragment:
    position = hint.get("position")
    if not isinstance(position, dict):
        raise ValueError("Inlay hint has no position")
    return HintFragment.model_validate(
        {
            "line": position.get("line"),
            "column": position.get("character"),
            "label": hint.get("label"),
        }
    )


def parse_inlay_hints(payload: list[dict[str, Any]] | None) -> list[HintFragment]:
    """Convert a ``textDocument/inlayHint`` result, skipping malformed entries."""
    fragments: list[HintFragment] = []
    for index, hint in enumerate(payload or []):
        try:
            fragments.append(parse_inlay_hint(hint))
        except (ValidationError, ValueError, AttributeError) as exc:
            logger.warning("Skipping malformed inlay hint #%d: %s", index, exc)
    return fragments


def load_inlay_hints(path: str | Path) -> list[HintFragment]:
    file_path = Path(path)
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FileNotFoundError(f"Hints file not found: {path}") from None
    if isinstance(payload, dict):
        payload = payload.get("result")
    if payload is not None and not isinstance(payload, list):
        raise ValueError(f"Expected a list of inlay hints in {path}")
    return parse_inlay_hints(payload)
