"""股票池提供者 Port"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StockUniverseProviderPort(Protocol):
    """股票池提供者 Port

    提供預設篩選的股票代碼與名稱
    """

    def get_stock_list(self) -> list[str]:
        """取得股票代碼清單 (內部格式，例如 2330)"""
        ...

    def get_stock_name(self, symbol: str) -> str:
        """取得股票名稱 (未知時回傳空字串)"""
        ...
