# ABOUTME: Shared pytest fixtures for Booked tests.
# ABOUTME: Provides a sample book, an empty store with a fixed clock, and a temp database path.

from pathlib import Path

import pytest

from booked.library.follows import FollowRegistry
from booked.library.store import LibraryStore
from booked.library.types import BookEntry
from tests.fixtures.books import FIXED_NOW, make_book


@pytest.fixture
def sample_book() -> BookEntry:
    """1984 by George Orwell: ten chapters, not started."""
    return make_book()


@pytest.fixture
def store() -> LibraryStore:
    """An empty LibraryStore whose clock always returns FIXED_NOW."""
    return LibraryStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def follows() -> FollowRegistry:
    """An empty FollowRegistry."""
    return FollowRegistry()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a throwaway library database."""
    return tmp_path / "library.db"
