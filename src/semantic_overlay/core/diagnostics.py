from collections.abc import Iterable
from typing import Any

from semantic_overlay.config import HintMode

DECOMPILATION_DIAGNOSTIC_SOURCE = "masm-lsp/decompilation"


def filter_diagnostics(diagnostics: Iterable[dict[str, Any]], mode: HintMode) -> list[dict[str, Any]]:
    """Drop decompilation-failure diagnostics unless decompilation hints are shown."""
    if mode is HintMode.DECOMPILATION:
        return list(diagnostics)
    return [d for d in diagnostics if d.get("source") != DECOMPILATION_DIAGNOSTIC_SOURCE]
