"""
Persistent Storage Layer for the Prompt Structurer.

A SQLite-backed string key-value table.  Values are opaque strings; callers
decide how to encode them (the template store keeps a JSON array under a
single key).  Writes are last-writer-wins.
"""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from config.config import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Database Manager
# ---------------------------------------------------------------------------

class Database:
    """SQLite-backed key-value persistence with auto-migration."""

    def __init__(self, db_path: str = "data/prompt_structurer.db"):
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_tables()
        logger.info(f"Database initialised at {db_path}")

    # -- connection helper --------------------------------------------------

    @contextmanager
    def connection(self):
        conn = sqlite3.connect(self.db_path, timeout=10)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    # -- schema -------------------------------------------------------------

    def _init_tables(self):
        with self.connection() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
            """)

    # ======================================================================
    # Key-value access
    # ======================================================================

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string for *key*, or None if absent."""
        with self.connection() as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            return row["value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with self.connection() as conn:
            conn.execute(
                """INSERT INTO kv_store (key, value, updated_at) VALUES (?,?,?)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                                  updated_at = excluded.updated_at""",
                (key, value, datetime.now().isoformat()),
            )

    def remove_item(self, key: str) -> None:
        with self.connection() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self) -> List[str]:
        with self.connection() as conn:
            return [r["key"] for r in conn.execute("SELECT key FROM kv_store ORDER BY key")]

    def clear(self) -> None:
        with self.connection() as conn:
            conn.execute("DELETE FROM kv_store")
