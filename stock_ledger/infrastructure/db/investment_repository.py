# stock_ledger/infrastructure/db/investment_repository.py

from __future__ import annotations

import logging
from contextlib import closing
from decimal import Decimal
from typing import List, Optional, Union

from stock_ledger.domain.errors import RecordNotFound
from stock_ledger.domain.models.investment import InvestmentRecord
from stock_ledger.domain.services_interfaces.i_investment_repo import IInvestmentRepository
from stock_ledger.domain.validation import validate_current_price
from .sqlite_connection import SQLiteConnectionProvider

logger = logging.getLogger(__name__)


class SQLiteInvestmentRepository(IInvestmentRepository):
    """
    IInvestmentRepository'nin SQLite implementasyonu.
    investments tablosuna erişir.
    """

    def __init__(self, connection_provider: SQLiteConnectionProvider) -> None:
        self._cp = connection_provider

    # ---------- Şema ---------- #

    def initialize(self) -> None:
        sql = """
            CREATE TABLE IF NOT EXISTS investments (
                id            INTEGER PRIMARY KEY AUTOINCREMENT,
                symbol        TEXT    NOT NULL,
                cost_price    REAL    NOT NULL CHECK (cost_price > 0),
                shares        INTEGER NOT NULL CHECK (shares > 0),
                current_price REAL             CHECK (current_price IS NULL OR current_price >= 0)
            )
        """
        with self._cp.get_connection() as conn:
            with closing(conn.cursor()) as cursor:
                cursor.execute(sql)

        logger.info("Ledger schema ready at %s", self._cp.db_path)

    # ---------- Row → Domain Mapper ---------- #

    def _row_to_record(self, row) -> InvestmentRecord:
        """
        SQLite REAL kolonları float döner; Decimal(str(...)) ile
        165.25 gibi değerleri birebir koruyoruz.
        """
        current_price = row["current_price"]
        if current_price is not None:
            current_price = Decimal(str(current_price))

        return InvestmentRecord(
            id=row["id"],
            symbol=row["symbol"],
            cost_price=Decimal(str(row["cost_price"])),
            shares=row["shares"],
            current_price=current_price,
        )

    # ---------- READ operasyonları ---------- #

    def list_all(self) -> List[InvestmentRecord]:
        sql = """
            SELECT id, symbol, cost_price, shares, current_price
            FROM investments
            ORDER BY id
        """
        with self._cp.get_connection() as conn:
            with closing(conn.cursor()) as cursor:
                cursor.execute(sql)
                rows = cursor.fetchall()

        return [self._row_to_record(r) for r in rows]

    def get_by_id(self, record_id: int) -> Optional[InvestmentRecord]:
        sql = """
            SELECT id, symbol, cost_price, shares, current_price
            FROM investments
            WHERE id = ?
        """
        with self._cp.get_connection() as conn:
            with closing(conn.cursor()) as cursor:
                cursor.execute(sql, (record_id,))
                row = cursor.fetchone()

        if row is None:
            return None
        return self._row_to_record(row)

    # ---------- WRITE operasyonları ---------- #

    def create(
        self,
        symbol: str,
        cost_price: Union[Decimal, int, float],
        shares: int,
    ) -> int:
        # Normalizasyon + validasyon: hatalı girdi DB'ye hiç gitmez.
        record = InvestmentRecord.new(symbol, cost_price, shares)

        sql = """
            INSERT INTO investments (symbol, cost_price, shares)
            VALUES (?, ?, ?)
        """
        with self._cp.get_connection() as conn:
            with closing(conn.cursor()) as cursor:
                cursor.execute(
                    sql,
                    (
                        record.symbol,
                        float(record.cost_price),
                        record.shares,
                    ),
                )
                record_id = cursor.lastrowid

        logger.info(
            "Created investment id=%s %s x%s @ %s",
            record_id, record.symbol, record.shares, record.cost_price,
        )
        return record_id

    def set_current_price(
        self,
        record_id: int,
        price: Union[Decimal, int, float],
    ) -> None:
        current_price = validate_current_price(price)

        sql = """
            UPDATE investments
            SET current_price = ?
            WHERE id = ?
        """
        with self._cp.get_connection() as conn:
            with closing(conn.cursor()) as cursor:
                cursor.execute(sql, (float(current_price), record_id))
                # SQLite eşleşen satırı sayar; aynı değeri yazmak da 1 döner.
                matched = cursor.rowcount

        if matched == 0:
            raise RecordNotFound(record_id)

        logger.info("Set current price of investment id=%s to %s", record_id, current_price)
