import logging
import sqlite3
from typing import Optional

from config import settings

logger = logging.getLogger(__name__)

# Default database file; tests and callers may pass their own path instead.
DATABASE_FILE = settings.db_file


def get_db_connection(db_file: Optional[str] = None) -> sqlite3.Connection:
    """Open a connection to the SQLite database with dict-like rows."""
    path = db_file or DATABASE_FILE
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    logger.debug("Opened SQLite database at %s", path)
    return conn


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the books table if it does not exist yet."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS books (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            author TEXT NOT NULL,
            stars REAL NOT NULL
        )
    """)
    conn.execute("CREATE INDEX IF NOT EXISTS idx_books_author ON books(author)")
    conn.commit()


def initialize_database(db_file: Optional[str] = None) -> sqlite3.Connection:
    """Open the database and make sure the schema exists."""
    conn = get_db_connection(db_file)
    try:
        create_tables(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn
