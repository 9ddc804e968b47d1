import os
import sqlite3
from typing import Optional

from .config import settings


def get_db_connection(db_path: Optional[str] = None):
    """Establishes a connection to the SQLite database."""
    conn = sqlite3.connect(db_path or settings.db_path)
    conn.row_factory = sqlite3.Row
    return conn


def create_log_table(db_path: Optional[str] = None):
    """Creates the log table if it doesn't exist."""
    conn = get_db_connection(db_path)
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp DATETIME DEFAULT CURRENT_TIMESTAMP,
                logger TEXT,
                level TEXT,
                message TEXT
            );
        """
        )
    conn.close()


def create_progress_table(db_path: Optional[str] = None):
    """Creates the keyed progress record table if it doesn't exist."""
    conn = get_db_connection(db_path)
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS progress (
                key TEXT PRIMARY KEY,
                payload TEXT NOT NULL,
                updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
            );
        """
        )
    conn.close()


def read_record(key: str, db_path: Optional[str] = None) -> Optional[str]:
    conn = get_db_connection(db_path)
    try:
        row = conn.execute(
            "SELECT payload FROM progress WHERE key = ?", (key,)
        ).fetchone()
    finally:
        conn.close()
    return row["payload"] if row else None


def write_record(key: str, payload: str, db_path: Optional[str] = None):
    conn = get_db_connection(db_path)
    with conn:
        conn.execute(
            """
            INSERT INTO progress (key, payload) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET
                payload = excluded.payload,
                updated_at = CURRENT_TIMESTAMP
        """,
            (key, payload),
        )
    conn.close()


def init_db(db_path: Optional[str] = None):
    """Initializes the database and creates necessary tables."""
    db_path = db_path or settings.db_path
    db_dir = os.path.dirname(db_path)
    if db_dir and not os.path.exists(db_dir):
        os.makedirs(db_dir, exist_ok=True)
    create_log_table(db_path)
    create_progress_table(db_path)
