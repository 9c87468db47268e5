"""價格歷史提供者 Port"""

from typing import Protocol, runtime_checkable

from libs.shared.src.dtos.screening.price_series_dto import PriceSeriesDTO


@runtime_checkable
class PriceHistoryProviderPort(Protocol):
    """價格歷史提供者 Port"""

    def get_price_history(self, symbol: str) -> PriceSeriesDTO:
        """取得已清理的日線收盤/最高/最低序列

        Raises:
            StockDataUnavailableError: 無法取得價格資料
        """
        ...

    def get_current_price(self, symbol: str) -> float | None:
        """取得即時報價 (無法取得時回傳 None)"""
        ...
