# stock_ledger/infrastructure/db/sqlite_connection.py

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, Optional

from stock_ledger.domain.errors import StorageUnavailable

logger = logging.getLogger(__name__)


@dataclass
class SQLiteConfig:
    db_path: str = "stock.db"
    timeout: float = 5.0


class SQLiteConnectionProvider:
    """
    Tek bir SQLite bağlantısını sahiplenen sınıf.
    Uygulamanın tamamında tek bir instance kullanılır; app.py oluşturur,
    kapanışta close() çağrılır.
    """

    def __init__(self, config: SQLiteConfig) -> None:
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    @property
    def db_path(self) -> str:
        return self._config.db_path

    def _open(self) -> sqlite3.Connection:
        try:
            # Bağlantı async servisin worker thread'inde de kullanılıyor.
            conn = sqlite3.connect(
                self._config.db_path,
                timeout=self._config.timeout,
                check_same_thread=False,
            )
        except sqlite3.Error as e:
            logger.error("Could not open ledger database %s: %s", self._config.db_path, e)
            raise StorageUnavailable(
                f"Cannot open ledger database {self._config.db_path!r}: {e}"
            ) from e

        conn.row_factory = sqlite3.Row
        logger.debug("Opened ledger database %s", self._config.db_path)
        return conn

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """
        with provider.get_connection() as conn: şeklinde kullan.
        Başarıda commit, hatada rollback.
        """
        with self._lock:
            if self._conn is None:
                self._conn = self._open()

            conn = self._conn
            try:
                yield conn
                conn.commit()
            except sqlite3.IntegrityError:
                conn.rollback()
                raise
            except sqlite3.DatabaseError as e:
                # OperationalError ve bozuk/SQLite olmayan dosyalar
                conn.rollback()
                logger.exception("Ledger database operation failed")
                raise StorageUnavailable(f"Ledger database unavailable: {e}") from e
            except Exception:
                conn.rollback()
                raise

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Closed ledger database %s", self._config.db_path)
