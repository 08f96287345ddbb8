"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from tree_sitter import Language, Query
from tree_sitter_language_pack import get_language

from tests.helpers import RecordingHintSource

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def queries_dir() -> Path:
    """Return the path to the bundled highlight queries."""
    return _REPO_ROOT / "src" / "semantic_overlay" / "queries"


@pytest.fixture
def python_language() -> Language:
    """Return the tree-sitter Python language."""
    return get_language("python")


@pytest.fixture
def python_highlights_query(queries_dir: Path, python_language: Language) -> Query:
    """Load the Python highlights query."""
    return Query(python_language, (queries_dir / "python_highlights.scm").read_text())


@pytest.fixture
def go_highlights_query(queries_dir: Path) -> Query:
    """Load the Go highlights query."""
    return Query(get_language("go"), (queries_dir / "go_highlights.scm").read_text())


@pytest.fixture
def hint_source() -> RecordingHintSource:
    return RecordingHintSource()
