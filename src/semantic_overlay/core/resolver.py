import logging
from collections.abc import Iterable, Sequence

from semantic_overlay.core.legend import DEFAULT_TABLE, ClassificationTable
from semantic_overlay.core.positions import ClaimedRanges, line_segments, line_width
from semantic_overlay.models import Capture, Classification, ResolvedToken

logger = logging.getLogger(__name__)


def _sort_key(item: tuple[int, Capture, Classification]) -> tuple[int, int, int, int, int]:
    index, capture, _ = item
    start, end = capture.span.start, capture.span.end
    # With equal starts an earlier end is a shorter span, so specific captures sort first.
    return (start.line, start.column, end.line, end.column, index)


def resolve_captures(
    captures: Iterable[Capture],
    line_lengths: Sequence[int],
    table: ClassificationTable = DEFAULT_TABLE,
) -> list[ResolvedToken]:
    """Flatten possibly overlapping captures into non-overlapping single-line tokens.

    Captures are ordered by start position, then by span length (shorter first),
    then by their position in ``captures``. Walking that order, each per-line
    segment is emitted unless it overlaps a range already claimed on its line.
    Segments are clamped to the line width; anything that ends up empty is
    skipped. The result is sorted by ``(line, start_column)``.
    """
    candidates: list[tuple[int, Capture, Classification]] = []
    for index, capture in enumerate(captures):
        if not capture.span.is_valid:
            logger.debug("Skipping capture %r with malformed span %s", capture.name, capture.span)
            continue
        classification = table.lookup(capture.name)
        if classification is None:
            continue
        candidates.append((index, capture, classification))

    candidates.sort(key=_sort_key)

    claimed = ClaimedRanges()
    tokens: list[ResolvedToken] = []
    for _, capture, classification in candidates:
        for line, start_col, end_col in line_segments(capture.span, line_lengths):
            end_col = min(end_col, line_width(line_lengths, line))
            if end_col - start_col <= 0:
                continue
            if claimed.overlaps(line, start_col, end_col):
                continue
            claimed.claim(line, start_col, end_col)
            tokens.append(
                ResolvedToken(
                    line=line,
                    start_column=start_col,
                    length=end_col - start_col,
                    classification=classification,
                )
            )

    tokens.sort(key=lambda t: (t.line, t.start_column))
    return tokens
