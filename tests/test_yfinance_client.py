"""
YFinanceMarketDataClient with yf.download patched (no network).
"""

from decimal import Decimal
from unittest.mock import patch

import pandas as pd
import pytest

from stock_ledger.infrastructure.market_data.yfinance_client import YFinanceMarketDataClient

DOWNLOAD = "stock_ledger.infrastructure.market_data.yfinance_client.yf.download"


def multi_ticker_frame():
    index = pd.date_range("2026-10-12", periods=3, freq="D")
    columns = pd.MultiIndex.from_product([["Close", "Open"], ["AAPL", "MSFT"]])
    data = [
        [160.0, 300.0, 159.0, 299.0],
        [165.25, 305.5, 160.0, 300.0],
        [float("nan"), 310.0, 165.0, 305.0],
    ]
    return pd.DataFrame(data, index=index, columns=columns)


class TestYFinanceMarketDataClient:

    def test_latest_prices_multi_index(self):
        with patch(DOWNLOAD, return_value=multi_ticker_frame()) as download:
            prices = YFinanceMarketDataClient().get_latest_prices(["AAPL", "MSFT"])

        # AAPL'in son satırı NaN, bir önceki kapanış alınır
        assert prices == {"AAPL": Decimal("165.25"), "MSFT": Decimal("310.0")}
        assert download.call_args.kwargs["tickers"] == ["AAPL", "MSFT"]

    def test_missing_ticker_is_skipped(self):
        with patch(DOWNLOAD, return_value=multi_ticker_frame()):
            prices = YFinanceMarketDataClient().get_latest_prices(["AAPL", "GOOG"])

        assert prices == {"AAPL": Decimal("165.25")}

    def test_single_ticker_flat_columns(self):
        df = pd.DataFrame(
            {"Close": [99.5, 101.25]},
            index=pd.date_range("2026-10-15", periods=2, freq="D"),
        )
        with patch(DOWNLOAD, return_value=df) as download:
            price = YFinanceMarketDataClient().get_latest_price("NVDA")

        assert price == Decimal("101.25")
        assert download.call_args.kwargs["tickers"] == "NVDA"

    def test_empty_download(self):
        with patch(DOWNLOAD, return_value=pd.DataFrame()):
            client = YFinanceMarketDataClient()
            assert client.get_latest_prices(["AAPL"]) == {}
            with pytest.raises(ValueError):
                client.get_latest_price("AAPL")

    def test_no_symbols_skips_download(self):
        with patch(DOWNLOAD) as download:
            assert YFinanceMarketDataClient().get_latest_prices([]) == {}

        download.assert_not_called()
