# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Key/value persistence for roster snapshots.

Values are stored as JSON text. Loading is tolerant (absent or
malformed data yields ``None``) and saving is best-effort: failures are
logged and counted, never raised to the caller.
"""

import json
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from roster.core.logging import get_logger
from roster.metrics.prometheus import STORAGE_FAILURES

logger = get_logger(__name__)


class KeyValueStore:
    """Base store: JSON encoding on top of raw text reads and writes."""

    def load(self, key: str) -> Optional[Any]:
        try:
            raw = self._read(key)
        except Exception as exc:
            STORAGE_FAILURES.labels(operation="load").inc()
            logger.error("Failed to load key %s: %s", key, exc)
            return None
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError as exc:
            STORAGE_FAILURES.labels(operation="parse").inc()
            logger.error("Failed to parse JSON for %s: %s", key, exc)
            return None

    def save(self, key: str, value: Any) -> None:
        try:
            self._write(key, json.dumps(value))
        except Exception as exc:
            STORAGE_FAILURES.labels(operation="save").inc()
            logger.error("Failed to save key %s: %s", key, exc)

    def ping(self) -> bool:
        return True

    # ── Backend hooks ──

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, raw: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    """Process-local store, used for tests and ephemeral deployments."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def _read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def put_raw(self, key: str, raw: str) -> None:
        """Store raw text verbatim (seeding legacy or corrupted data)."""
        self._data[key] = raw

    def get_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def clear(self) -> None:
        self._data.clear()


class SQLStore(KeyValueStore):
    """Single-table key/value store on any SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._ready = False

    def _ensure_table(self) -> None:
        if self._ready:
            return
        with self._engine.begin() as conn:
            conn.execute(text(
                "CREATE TABLE IF NOT EXISTS kv_store ("
                " store_key VARCHAR(255) PRIMARY KEY,"
                " store_value TEXT NOT NULL)"
            ))
        self._ready = True

    def _read(self, key: str) -> Optional[str]:
        self._ensure_table()
        with self._engine.connect() as conn:
            row = conn.execute(
                text("SELECT store_value FROM kv_store WHERE store_key = :key"),
                {"key": key},
            ).first()
        return row[0] if row else None

    def _write(self, key: str, raw: str) -> None:
        self._ensure_table()
        with self._engine.begin() as conn:
            conn.execute(text("DELETE FROM kv_store WHERE store_key = :key"), {"key": key})
            conn.execute(
                text("INSERT INTO kv_store (store_key, store_value) VALUES (:key, :value)"),
                {"key": key, "value": raw},
            )

    def ping(self) -> bool:
        """Readiness probe helper."""
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as exc:
            logger.warning("Storage ping failed: %s", exc)
            return False
