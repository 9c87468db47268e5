"""靜態股票池 Adapter

實作 StockUniverseProviderPort，提供熱門台股清單
"""

from libs.screening.src.ports.stock_universe_provider_port import (
    StockUniverseProviderPort,
)
from libs.shared.src.constants.stock_universe import TW_WATCHLIST


class StaticStockUniverseAdapter(StockUniverseProviderPort):
    """靜態股票池 (預設為熱門台股)"""

    def __init__(self, stocks: dict[str, str] | None = None) -> None:
        self._stocks = dict(TW_WATCHLIST if stocks is None else stocks)

    def get_stock_list(self) -> list[str]:
        return list(self._stocks)

    def get_stock_name(self, symbol: str) -> str:
        return self._stocks.get(symbol, "")
