"""
storage.py: Best-effort key/value persistence for the best score.

Stores never raise into the game: a failed read is reported as an absent
value, a failed write as False.
"""

import logging
import sqlite3
from typing import Dict, Optional, Protocol

from .constants import DB_FILE, STORAGE_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> bool: ...


class MemoryStore:
    """In-process store, used by tests and by `--memory` runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True


class SqliteStore:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        self.db_file = db_file
        self.conn: Optional[sqlite3.Connection] = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.setup()
        except sqlite3.Error as e:
            logger.warning("Storage unavailable (%s): %s", db_file, e)
            self.close()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS KeyValue (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        if self.conn is None:
            return None
        try:
            row = self.conn.execute(
                "SELECT value FROM KeyValue WHERE key=?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read %r: %s", key, e)
            return None
        return row[0] if row else None

    def set(self, key: str, value: str) -> bool:
        if self.conn is None:
            return False
        try:
            self.conn.execute(
                "INSERT OR REPLACE INTO KeyValue (key, value) VALUES (?, ?)",
                (key, value))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not write %r: %s", key, e)
            return False
        return True

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def load_best(store: KeyValueStore) -> int:
    """Reads the persisted best score; anything unusable counts as 0."""
    raw = store.get(STORAGE_KEY)
    if raw is None:
        return 0
    try:
        best = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid stored best score: %r", raw)
        return 0
    return max(0, best)


def save_best(store: KeyValueStore, best: int) -> bool:
    ok = store.set(STORAGE_KEY, str(best))
    if not ok:
        logger.warning("Best score %d was not persisted", best)
    return ok
