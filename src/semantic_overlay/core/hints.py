"""Group inlay hint fragments per line into one aligned trailing comment."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from semantic_overlay.core.positions import line_width
from semantic_overlay.models import AggregatedLineHint, DecorationSpec, HintFragment

logger = logging.getLogger(__name__)

HINT_PREFIX = "# "
NBSP = "\u00a0"

_LEADING_WHITESPACE = re.compile(r"^[\s\u00a0]*")
_WHITESPACE_RUN = re.compile(r"[\s\u00a0]+")


def normalize_label(label: str) -> str:
    return _WHITESPACE_RUN.sub(" ", label).strip()


def leading_whitespace(label: str) -> str:
    match = _LEADING_WHITESPACE.match(label)
    return match.group(0) if match else ""


def compute_margin(line_length: int, align_column: int, minimum_padding: int) -> int:
    if align_column > 0 and line_length < align_column:
        return align_column - line_length
    return minimum_padding


def combine_labels(labels: Sequence[str]) -> str:
    """Join the raw labels of one line into the rendered overlay text.

    The first label's leading whitespace is kept as indentation after the
    prefix; every ordinary space in the result becomes a non-breaking space.
    """
    indent = leading_whitespace(labels[0]) if labels else ""
    text = HINT_PREFIX + indent + " ".join(normalize_label(label) for label in labels)
    return text.replace(" ", NBSP)


def group_fragments(fragments: Iterable[HintFragment], line_count: int) -> dict[int, list[str]]:
    by_line: dict[int, list[str]] = {}
    for fragment in fragments:
        if fragment.line < 0 or fragment.column < 0 or fragment.line >= line_count:
            logger.debug("Skipping hint at %d:%d outside the document", fragment.line, fragment.column)
            continue
        if not fragment.parts:
            continue
        by_line.setdefault(fragment.line, []).append(fragment.text)
    return by_line


def aggregate_hints(
    fragments: Iterable[HintFragment],
    line_lengths: Sequence[int],
    align_column: int = 40,
    minimum_padding: int = 2,
) -> list[AggregatedLineHint]:
    """Return one hint per line that has fragments, in first-seen line order."""
    by_line = group_fragments(fragments, len(line_lengths))
    return [
        AggregatedLineHint(
            line=line,
            text=combine_labels(labels),
            margin=compute_margin(line_width(line_lengths, line), align_column, minimum_padding),
        )
        for line, labels in by_line.items()
    ]


def build_decorations(hints: Iterable[AggregatedLineHint], line_lengths: Sequence[int]) -> list[DecorationSpec]:
    return [
        DecorationSpec(
            line=hint.line,
            anchor_column=line_width(line_lengths, hint.line),
            text=hint.text,
            margin=hint.margin,
        )
        for hint in hints
    ]
