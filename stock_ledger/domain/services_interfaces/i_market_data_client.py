# stock_ledger/domain/services_interfaces/i_market_data_client.py

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Sequence


class IMarketDataClient(ABC):
    """
    Güncel fiyat kaynağını soyutlayan arayüz.

        - yfinance            -> YFinanceMarketDataClient (gerçek senaryo)
        - FakeMarketClient    -> unit test
    """

    @abstractmethod
    def get_latest_price(self, symbol: str) -> Decimal:
        """
        Tek bir sembol için son kapanış fiyatını döner.
        Veri yoksa ValueError fırlatır.
        """
        raise NotImplementedError

    @abstractmethod
    def get_latest_prices(self, symbols: Sequence[str]) -> Dict[str, Decimal]:
        """
        Birden fazla sembol için son kapanış fiyatları.

        Dönüş:
          { "AAPL": Decimal("165.25"), ... }

        Veri gelmeyen semboller map'e eklenmez.
        """
        raise NotImplementedError
