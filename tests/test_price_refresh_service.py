"""
PriceRefreshService with a fake market data client (no network).
"""

from decimal import Decimal
from typing import Dict, Sequence

import pytest

from stock_ledger.application.services.price_refresh_service import PriceRefreshService
from stock_ledger.domain.services_interfaces.i_market_data_client import IMarketDataClient


class FakeMarketClient(IMarketDataClient):

    def __init__(self, prices: Dict[str, Decimal]) -> None:
        self.prices = prices
        self.requested = []

    def get_latest_price(self, symbol: str) -> Decimal:
        return self.prices[symbol]

    def get_latest_prices(self, symbols: Sequence[str]) -> Dict[str, Decimal]:
        self.requested.append(list(symbols))
        return {s: self.prices[s] for s in symbols if s in self.prices}


class TestPriceRefreshService:

    @pytest.mark.asyncio
    async def test_refresh_sets_current_prices(self, ledger):
        aapl_1 = await ledger.create("aapl", 150, 10)
        aapl_2 = await ledger.create("AAPL", 140, 5)
        msft = await ledger.create("msft", 300, 1)
        client = FakeMarketClient({"AAPL": Decimal("165.25"), "MSFT": Decimal("280")})

        result = await PriceRefreshService(ledger, client).refresh_all()

        assert result.updated_count == 3
        assert result.missing_symbols == []
        assert client.requested == [["AAPL", "MSFT"]]

        by_id = {r.id: r for r in await ledger.list_all()}
        assert by_id[aapl_1].current_price == Decimal("165.25")
        assert by_id[aapl_2].current_price == Decimal("165.25")
        assert by_id[msft].current_price == Decimal("280")

    @pytest.mark.asyncio
    async def test_missing_symbols_are_left_untouched(self, ledger):
        known = await ledger.create("AAPL", 150, 10)
        unknown = await ledger.create("XXXX", 1, 1)
        await ledger.set_current_price(unknown, 2)

        result = await PriceRefreshService(
            ledger, FakeMarketClient({"AAPL": Decimal("151")})
        ).refresh_all()

        assert result.updated_count == 1
        assert result.missing_symbols == ["XXXX"]
        assert (await ledger.get_by_id(known)).current_price == Decimal("151")
        assert (await ledger.get_by_id(unknown)).current_price == Decimal("2")

    @pytest.mark.asyncio
    async def test_empty_ledger_does_not_call_client(self, ledger):
        client = FakeMarketClient({})

        result = await PriceRefreshService(ledger, client).refresh_all()

        assert result.updated_count == 0
        assert client.requested == []
