# stock_ledger/application/services/price_refresh_service.py

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from stock_ledger.application.services.ledger_service import LedgerService
from stock_ledger.domain.services_interfaces.i_market_data_client import IMarketDataClient

logger = logging.getLogger(__name__)


@dataclass
class PriceRefreshResult:
    """
    Güncel fiyat yenilemesi sonrası basit özet.

    - updated_count: Kaç kayıt güncellendi
    - prices: { symbol: price }
    - missing_symbols: fiyatı bulunamayan semboller (kayıtlarına dokunulmadı)
    """
    updated_count: int
    prices: Dict[str, Decimal] = field(default_factory=dict)
    missing_symbols: List[str] = field(default_factory=list)


class PriceRefreshService:
    """
    Kayıtların current_price alanını piyasa verisiyle dolduran servis.

    Kullanıcının elle girdiği fiyatla aynı yolu izler:
    her kayıt için LedgerService.set_current_price çağrılır.
    """

    def __init__(
        self,
        ledger: LedgerService,
        market_data_client: IMarketDataClient,
    ) -> None:
        self._ledger = ledger
        self._market_data_client = market_data_client

    async def refresh_all(self) -> PriceRefreshResult:
        records = await self._ledger.list_all()
        if not records:
            return PriceRefreshResult(updated_count=0)

        symbols = list(dict.fromkeys(r.symbol for r in records))

        # yfinance senkron çalışıyor, event loop'u bloklamasın
        prices = await asyncio.to_thread(self._market_data_client.get_latest_prices, symbols)

        missing = [s for s in symbols if s not in prices]
        if missing:
            logger.warning("No market price for: %s", ", ".join(missing))

        updated = 0
        for record in records:
            price = prices.get(record.symbol)
            if price is None:
                continue
            await self._ledger.set_current_price(record.id, price)
            updated += 1

        logger.info("Refreshed current price of %d/%d investments", updated, len(records))
        return PriceRefreshResult(
            updated_count=updated,
            prices={s: p for s, p in prices.items() if s in symbols},
            missing_symbols=missing,
        )
