# ABOUTME: Unit tests for StateRepository persistence and the database connection.
# ABOUTME: Validates loading empty state, saving and reloading stores and follow lists.

import sqlite3
from pathlib import Path

import pytest

from booked.db.connection import open_library
from booked.db.repository import StateRepository
from booked.library.follows import FollowRegistry
from booked.library.types import ReadingStatus
from tests.fixtures.books import ALICE, BOB, FIXED_NOW, ISBN_1984, make_book


class TestOpenLibrary:
    """Tests for open_library."""

    def test_creates_parent_dirs_and_table(self, tmp_path: Path) -> None:
        """Opening a new path creates the file and the state table."""
        db_path = tmp_path / "nested" / "dir" / "library.db"
        conn = open_library(db_path)
        try:
            assert db_path.exists()
            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='state'"
            )
            assert cursor.fetchone() is not None
        finally:
            conn.close()

    def test_reopen_is_safe(self, db_path: Path) -> None:
        """Opening an existing database twice does not fail."""
        open_library(db_path).close()
        conn = open_library(db_path)
        assert isinstance(conn, sqlite3.Connection)
        conn.close()


class TestStateRepository:
    """Tests for load/save of the registries."""

    def test_empty_database_loads_empty(self, db_path: Path) -> None:
        """A fresh database yields an empty store and registry."""
        conn = open_library(db_path)
        repo = StateRepository(conn)

        assert repo.load_store().total_record_count() == 0
        assert repo.load_follows().follows == {}
        conn.close()

    def test_store_survives_reopen(self, db_path: Path) -> None:
        """Saved libraries are reloaded with progress and notes intact."""
        conn = open_library(db_path)
        repo = StateRepository(conn)
        store = repo.load_store(clock=lambda: FIXED_NOW)
        store.create_record(ALICE, make_book())
        store.set_chapter_note(ALICE, ISBN_1984, 3, "Room 101")
        store.mark_completed(ALICE, ISBN_1984)
        repo.save_store(store)
        conn.close()

        conn = open_library(db_path)
        reloaded = StateRepository(conn).load_store()
        book = reloaded.get_record(ALICE, ISBN_1984)
        conn.close()

        assert book is not None
        assert book.reading_status is ReadingStatus.COMPLETED
        assert book.chapters_read == set(range(1, 11))
        assert book.chapter_notes == {3: "Room 101"}
        assert book.last_read_date == FIXED_NOW

    def test_save_overwrites_previous_state(self, db_path: Path) -> None:
        """A later save replaces the earlier blob."""
        conn = open_library(db_path)
        repo = StateRepository(conn)
        store = repo.load_store()
        store.create_record(ALICE, make_book())
        repo.save_store(store)
        store.delete_record(ALICE, ISBN_1984)
        repo.save_store(store)

        assert repo.load_store().total_record_count() == 0
        conn.close()

    def test_follows_survive_reopen(self, db_path: Path) -> None:
        """Saved follow lists are reloaded in order."""
        conn = open_library(db_path)
        repo = StateRepository(conn)
        registry = FollowRegistry()
        registry.follow(ALICE, BOB)
        registry.follow(ALICE, "carol.testnet")
        repo.save_follows(registry)
        conn.close()

        conn = open_library(db_path)
        reloaded = StateRepository(conn).load_follows()
        conn.close()

        assert reloaded.list_followed(ALICE) == [BOB, "carol.testnet"]

    def test_save_writes_both_registries(self, db_path: Path) -> None:
        """save persists the store and the follow lists together."""
        conn = open_library(db_path)
        repo = StateRepository(conn)
        store = repo.load_store()
        store.create_record(ALICE, make_book())
        registry = FollowRegistry()
        registry.follow(ALICE, BOB)
        repo.save(store, registry)
        conn.close()

        conn = open_library(db_path)
        repo = StateRepository(conn)
        assert repo.load_store().total_record_count() == 1
        assert repo.load_follows().list_followed(ALICE) == [BOB]
        conn.close()

    def test_save_is_all_or_nothing(self, db_path: Path) -> None:
        """If the follow lists cannot be written, the libraries are not kept either."""
        conn = open_library(db_path)
        repo = StateRepository(conn)
        store = repo.load_store()
        store.create_record(ALICE, make_book())
        unserializable = FollowRegistry({ALICE: [object()]})  # type: ignore[list-item]

        with pytest.raises(TypeError):
            repo.save(store, unserializable)
        conn.close()

        conn = open_library(db_path)
        repo = StateRepository(conn)
        assert repo.load_store().total_record_count() == 0
        assert repo.load_follows().follows == {}
        conn.close()
