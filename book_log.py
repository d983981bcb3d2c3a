import logging
import sqlite3
from typing import List, Optional

import database
from book import Book
from database import initialize_database

logger = logging.getLogger(__name__)

# Largest value an SQLite INTEGER PRIMARY KEY can hold
MAX_BOOK_ID = 2 ** 63 - 1


class StoreError(Exception):
    """Raised when the books database cannot be read or written."""


class BookLog:
    """Owns the single connection to the books table and its CRUD operations."""

    def __init__(self, db_file: Optional[str] = None) -> None:
        self.db_file = db_file or database.DATABASE_FILE
        self._conn: Optional[sqlite3.Connection] = None
        self._open_error: Optional[str] = None
        self._closed = False
        # A database that fails to open is not fatal: every later operation
        # reports its own StoreError and the menu keeps running.
        try:
            self._conn = initialize_database(self.db_file)
        except sqlite3.Error as e:
            self._open_error = str(e)
            logger.error("Could not open database %s: %s", self.db_file, e)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, name: str, author: str, stars: float) -> int:
        """Insert a new book and return the id the database assigned to it."""
        conn = self._connection()
        try:
            cursor = conn.execute(
                "INSERT INTO books (name, author, stars) VALUES (?, ?, ?)",
                (name.strip(), author.strip(), float(stars)),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise self._store_error("insert book", e) from e
        logger.debug("Inserted book %s", cursor.lastrowid)
        return cursor.lastrowid

    def list_books(self) -> List[Book]:
        """All books ordered by author; ties keep insertion order."""
        conn = self._connection()
        try:
            rows = conn.execute(
                "SELECT id, name, author, stars FROM books ORDER BY author ASC, id ASC"
            ).fetchall()
        except sqlite3.Error as e:
            raise self._store_error("list books", e) from e
        return [Book.from_dict(dict(row)) for row in rows]

    def find_book(self, book_id: int) -> Optional[Book]:
        conn = self._connection()
        if book_id > MAX_BOOK_ID:
            return None
        try:
            row = conn.execute(
                "SELECT id, name, author, stars FROM books WHERE id = ?", (book_id,)
            ).fetchone()
        except sqlite3.Error as e:
            raise self._store_error("fetch book", e) from e
        return Book.from_dict(dict(row)) if row else None

    def update_book(self, book_id: int, name: str, author: str, stars: float) -> int:
        """Overwrite name, author and stars of one book. Returns rows affected (0 or 1)."""
        conn = self._connection()
        if book_id > MAX_BOOK_ID:
            return 0
        try:
            cursor = conn.execute(
                "UPDATE books SET name = ?, author = ?, stars = ? WHERE id = ?",
                (name.strip(), author.strip(), float(stars), book_id),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise self._store_error("update book", e) from e
        logger.debug("Updated book %s (%s row(s))", book_id, cursor.rowcount)
        return cursor.rowcount

    def remove_book(self, book_id: int) -> int:
        """Delete one book by id. Returns rows affected (0 or 1)."""
        conn = self._connection()
        if book_id > MAX_BOOK_ID:
            return 0
        try:
            cursor = conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
            conn.commit()
        except sqlite3.Error as e:
            raise self._store_error("delete book", e) from e
        logger.debug("Deleted book %s (%s row(s))", book_id, cursor.rowcount)
        return cursor.rowcount

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Closed database %s", self.db_file)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------- Utilities ------------------------- #
    def _connection(self) -> sqlite3.Connection:
        if self._closed:
            raise StoreError("Book log is closed.")
        if self._conn is None:
            raise StoreError(f"Database {self.db_file} is not available: {self._open_error}")
        return self._conn

    @staticmethod
    def _store_error(action: str, exc: sqlite3.Error) -> StoreError:
        logger.error("Failed to %s: %s", action, exc)
        return StoreError(f"Could not {action}: {exc}")
