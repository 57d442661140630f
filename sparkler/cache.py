"""
SQLite cache for encoded animations, keyed by a hash of the normalized text.
Corrupt database files are discarded and recreated.
"""
from __future__ import annotations

import hashlib
import logging
import sqlite3
import threading
import time
from pathlib import Path
from typing import Optional, Tuple

from .config import DEFAULT_CACHE_MAX_BYTES

CACHE_FILENAME = "cache.sqlite"

logger = logging.getLogger(__name__)


def cache_key(text: str) -> str:
    """Return the sha256 hex digest of ``text``."""

    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class Cache:
    _lock = threading.RLock()

    def __init__(self, root: str | Path = ".cache", ns: str = "gifs", max_bytes: int = DEFAULT_CACHE_MAX_BYTES):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.db_path = self.root / CACHE_FILENAME
        self.ns, self.max_bytes = ns, max_bytes
        self.conn = self._connect(); self._init(); self._tune()

    def _connect(self):
        try:
            return sqlite3.connect(self.db_path, check_same_thread=False)
        except sqlite3.Error:
            self.db_path.unlink(missing_ok=True)
            return sqlite3.connect(self.db_path, check_same_thread=False)

    def _tune(self):
        with self.conn:
            self.conn.execute("PRAGMA journal_mode=WAL;")
            self.conn.execute("PRAGMA synchronous=NORMAL;")

    def _init(self):
        try:
            with self.conn:
                self.conn.execute(
                    "CREATE TABLE IF NOT EXISTS kv(ns TEXT,k TEXT,v BLOB,ts INTEGER,sz INTEGER,PRIMARY KEY(ns,k))"
                )
                self.conn.execute("CREATE INDEX IF NOT EXISTS idx_kv_ns_ts ON kv(ns, ts)")
        except sqlite3.DatabaseError:
            self._reset()

    def _reset(self):
        logger.warning("Cache database %s is corrupt, recreating it", self.db_path)
        with Cache._lock:
            self.conn.close()
            self.db_path.unlink(missing_ok=True)
            self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
            with self.conn:
                self.conn.execute("CREATE TABLE kv(ns TEXT,k TEXT,v BLOB,ts INTEGER,sz INTEGER,PRIMARY KEY(ns,k))")
                self.conn.execute("CREATE INDEX idx_kv_ns_ts ON kv(ns, ts)")

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def close(self) -> None:
        self.conn.close()

    def _now(self): return int(time.time())

    def get(self, key: str) -> Optional[bytes]:
        with Cache._lock:
            try:
                with self.conn:
                    row = self.conn.execute("SELECT v FROM kv WHERE ns=? AND k=?", (self.ns, key)).fetchone()
            except sqlite3.DatabaseError:
                self._reset()
                return None
        return None if not row else bytes(row[0])

    def put(self, key: str, value: bytes) -> None:
        ts, sz = self._now(), len(value)
        with Cache._lock, self.conn:
            self.conn.execute("INSERT OR REPLACE INTO kv(ns,k,v,ts,sz) VALUES(?,?,?,?,?)", (self.ns, key, value, ts, sz))
        if self.max_bytes > 0:
            self.prune(self.max_bytes)

    def get_text(self, text: str) -> Optional[bytes]:
        return self.get(cache_key(text))

    def put_text(self, text: str, value: bytes) -> None:
        self.put(cache_key(text), value)

    def stats(self) -> Tuple[int, int]:
        with Cache._lock, self.conn:
            c, s = self.conn.execute("SELECT COUNT(*), COALESCE(SUM(sz),0) FROM kv WHERE ns=?", (self.ns,)).fetchone()
            return int(c or 0), int(s or 0)

    def prune(self, bytes_target: int) -> int:
        """Evict the oldest entries until the namespace holds at most ``bytes_target`` bytes."""
        with Cache._lock, self.conn:
            total = (
                self.conn.execute("SELECT COALESCE(SUM(sz),0) FROM kv WHERE ns=?", (self.ns,)).fetchone()[0] or 0
            )
            if total <= bytes_target:
                return 0
            to_free, freed = total - bytes_target, 0
            rows = self.conn.execute("SELECT k, sz FROM kv WHERE ns=? ORDER BY ts ASC", (self.ns,)).fetchall()
            for k, sz in rows:
                self.conn.execute("DELETE FROM kv WHERE ns=? AND k=?", (self.ns, k))
                freed += (sz or 0)
                if freed >= to_free:
                    break
        logger.debug("Evicted %d bytes from cache namespace %s", freed, self.ns)
        return freed

    def clear(self) -> None:
        with Cache._lock, self.conn:
            self.conn.execute("DELETE FROM kv WHERE ns=?", (self.ns,))
