from __future__ import annotations

from pathlib import Path

import pytest

from lfg.logging import reset_logging
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a throwaway project rooted under the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _unconfigure_logging():
    yield
    reset_logging()
