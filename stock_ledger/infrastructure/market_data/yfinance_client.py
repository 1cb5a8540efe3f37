# stock_ledger/infrastructure/market_data/yfinance_client.py

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Sequence

import pandas as pd
import yfinance as yf

from stock_ledger.domain.services_interfaces.i_market_data_client import IMarketDataClient

logger = logging.getLogger(__name__)


class YFinanceMarketDataClient(IMarketDataClient):
    """
    IMarketDataClient arayüzünü yfinance ile implemente eden sınıf.

    Notlar:
      - Son birkaç günlük veri çekilip en son dolu Close değeri alınır;
        hafta sonu / tatil günlerinde de bir önceki kapanış döner.
      - Fiyat geçmişi saklanmaz, sadece son değer kullanılır.
    """

    def __init__(self, timeout: int = 10, lookback: str = "5d") -> None:
        self._timeout = timeout
        self._lookback = lookback

    # ----------------- Yardımcı metotlar ----------------- #

    def _to_decimal(self, value) -> Decimal:
        """
        yfinance/pandas'dan gelen float/np.float tiplerini güvenli şekilde Decimal'e çevir.
        """
        return Decimal(str(float(value)))

    def _download(self, tickers) -> pd.DataFrame:
        return yf.download(
            tickers=tickers,
            period=self._lookback,
            interval="1d",
            progress=False,
            auto_adjust=False,
            timeout=self._timeout,
        )

    def _last_close(self, close_series: pd.Series):
        close_series = close_series.dropna()
        if close_series.empty:
            return None
        return close_series.iloc[-1]

    # ----------------- Tekil fiyat ----------------- #

    def get_latest_price(self, symbol: str) -> Decimal:
        prices = self.get_latest_prices([symbol])
        if symbol not in prices:
            raise ValueError(f"No recent closing price for {symbol}")
        return prices[symbol]

    # ----------------- Toplu fiyat ----------------- #

    def get_latest_prices(self, symbols: Sequence[str]) -> Dict[str, Decimal]:
        """
        Not:
          - yfinance, birden fazla ticker verince kolon yapısı MultiIndex oluyor:
            ('Close', 'AAPL') gibi.
          - Veri gelmeyen semboller map'e eklenmez.
        """
        symbols = list(dict.fromkeys(symbols))
        if not symbols:
            return {}

        df = self._download(symbols if len(symbols) > 1 else symbols[0])

        if df.empty:
            logger.warning("yfinance returned no data for %s", ", ".join(symbols))
            return {}

        result: Dict[str, Decimal] = {}

        if isinstance(df.columns, pd.MultiIndex):
            for symbol in symbols:
                try:
                    close_series = df["Close", symbol]
                except KeyError:
                    logger.warning("No close column for %s", symbol)
                    continue
                close_val = self._last_close(close_series)
                if close_val is None:
                    continue
                result[symbol] = self._to_decimal(close_val)
        else:
            close_val = self._last_close(df["Close"])
            if close_val is not None:
                result[symbols[0]] = self._to_decimal(close_val)

        return result
