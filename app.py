import asyncio
import logging
from dataclasses import dataclass

from config.settings_loader import AppSettings, configure_logging, load_settings
from stock_ledger.infrastructure.db.sqlite_connection import SQLiteConnectionProvider
from stock_ledger.infrastructure.db.investment_repository import SQLiteInvestmentRepository
from stock_ledger.infrastructure.market_data.yfinance_client import YFinanceMarketDataClient

from stock_ledger.application.services.ledger_service import LedgerService
from stock_ledger.application.services.price_refresh_service import PriceRefreshService
from stock_ledger.application.services import valuation_service

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Sunum katmanına verilen servisler.
    Global DB handle yok; her şey buradan enjekte edilir.
    """
    ledger: LedgerService
    price_refresh_service: PriceRefreshService


def build_app(settings: AppSettings) -> AppContext:
    # 1) DB connection (süreç boyunca tek handle)
    conn_provider = SQLiteConnectionProvider(settings.db)

    # 2) Repository
    investment_repo = SQLiteInvestmentRepository(conn_provider)

    # 3) Market data client (yfinance)
    market_client = YFinanceMarketDataClient(timeout=settings.market_data_timeout)

    # 4) Services
    ledger = LedgerService(investment_repo, on_close=conn_provider.close)
    price_refresh_service = PriceRefreshService(ledger, market_client)

    return AppContext(ledger=ledger, price_refresh_service=price_refresh_service)


async def run(settings: AppSettings) -> None:
    context = build_app(settings)

    async with context.ledger as ledger:
        await ledger.initialize()

        records = await ledger.list_all()
        summary = valuation_service.summarize(records)
        logger.info(
            "Ledger %s: %d investments, cost basis %s, %d without current price",
            settings.db.db_path,
            summary.record_count,
            summary.total_cost_basis,
            summary.unpriced_count,
        )


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
