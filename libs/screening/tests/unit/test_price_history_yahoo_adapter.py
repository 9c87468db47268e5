"""PriceHistoryYahooAdapter 單元測試"""

from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from libs.screening.src.adapters.driven.yahoo.price_history_yahoo_adapter import (
    PriceHistoryYahooAdapter,
)
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)

TICKER = "libs.screening.src.adapters.driven.yahoo.price_history_yahoo_adapter.yf.Ticker"


def history_frame(closes, highs, lows) -> pd.DataFrame:
    index = pd.date_range("2025-01-02", periods=len(closes), freq="B")
    return pd.DataFrame({"Close": closes, "High": highs, "Low": lows}, index=index)


class TestPriceHistoryYahooAdapter:
    """測試 yfinance 價格 Adapter"""

    def test_converts_symbol_and_drops_invalid_bars(self) -> None:
        frame = history_frame(
            [100.0, float("nan"), 102.0], [101.0, 103.0, 104.0], [99.0, 100.0, 101.0]
        )
        with patch(TICKER) as mock_ticker:
            mock_ticker.return_value.history.return_value = frame
            series = PriceHistoryYahooAdapter().get_price_history("2330")

        mock_ticker.assert_called_once_with("2330.TW")
        assert series == {"close": [100.0, 102.0], "high": [101.0, 104.0], "low": [99.0, 101.0]}

    def test_empty_history_raises(self) -> None:
        with patch(TICKER) as mock_ticker:
            mock_ticker.return_value.history.return_value = pd.DataFrame()
            with pytest.raises(StockDataUnavailableError):
                PriceHistoryYahooAdapter().get_price_history("2330")

    def test_download_error_raises(self) -> None:
        with patch(TICKER, side_effect=RuntimeError("rate limited")):
            with pytest.raises(StockDataUnavailableError):
                PriceHistoryYahooAdapter().get_price_history("6000")

    def test_current_price(self) -> None:
        with patch(TICKER) as mock_ticker:
            mock_ticker.return_value.history.return_value = history_frame(
                [101.5], [102.0], [100.0]
            )
            assert PriceHistoryYahooAdapter().get_current_price("2330") == 101.5

    def test_current_price_failure_returns_none(self) -> None:
        ticker = MagicMock()
        ticker.history.side_effect = RuntimeError("boom")
        with patch(TICKER, return_value=ticker):
            assert PriceHistoryYahooAdapter().get_current_price("2330") is None
