"""價格歷史 Fake Adapter

實作 PriceHistoryProviderPort，用於測試
模擬 Yahoo Finance API
"""

from libs.screening.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.dtos.screening.price_series_dto import PriceSeriesDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class PriceHistoryFakeAdapter(PriceHistoryProviderPort):
    """價格歷史 Fake Adapter (模擬 yfinance)"""

    def __init__(self) -> None:
        self._series: dict[str, PriceSeriesDTO] = {}
        self._quotes: dict[str, float] = {}

    def set_series(self, symbol: str, series: PriceSeriesDTO) -> None:
        """設置價格序列（測試用）"""
        self._series[symbol] = series

    def set_flat_series(self, symbol: str, price: float, days: int = 60) -> None:
        """設置固定價格序列（測試用）"""
        self._series[symbol] = {
            "close": [price] * days,
            "high": [price] * days,
            "low": [price] * days,
        }

    def set_current_price(self, symbol: str, price: float) -> None:
        """設置現價（測試用）"""
        self._quotes[symbol] = price

    def get_price_history(self, symbol: str) -> PriceSeriesDTO:
        if symbol not in self._series:
            raise StockDataUnavailableError(symbol, "無歷史價格")
        return self._series[symbol]

    def get_current_price(self, symbol: str) -> float | None:
        return self._quotes.get(symbol)
