import asyncio
import logging

from app import build_app, run
from config.settings_loader import AppSettings
from stock_ledger.infrastructure.db.sqlite_connection import SQLiteConfig


def test_build_app_wires_services(tmp_path):
    settings = AppSettings(db=SQLiteConfig(db_path=str(tmp_path / "stock.db")))
    context = build_app(settings)

    async def scenario():
        async with context.ledger as ledger:
            await ledger.initialize()
            record_id = await ledger.create("aapl", 150, 10)
            return await ledger.get_by_id(record_id)

    record = asyncio.run(scenario())

    assert record.symbol == "AAPL"
    assert context.price_refresh_service is not None


def test_run_logs_summary(tmp_path, caplog):
    settings = AppSettings(db=SQLiteConfig(db_path=str(tmp_path / "stock.db")))

    with caplog.at_level(logging.INFO, logger="app"):
        asyncio.run(run(settings))

    assert "0 investments" in caplog.text
    assert (tmp_path / "stock.db").exists()
