"""Screening - Yahoo Finance Price History Adapter

直接使用 yfinance SDK
"""

import logging

import yfinance as yf

from libs.screening.src.domain.services.indicator_calculator import clean_price_bars
from libs.screening.src.domain.services.symbol_converter import to_yahoo_symbol
from libs.screening.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.constants.request_settings import PRICE_HISTORY_PERIOD
from libs.shared.src.dtos.screening.price_series_dto import (
    PriceBarDTO,
    PriceSeriesDTO,
)
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class PriceHistoryYahooAdapter(PriceHistoryProviderPort):
    """價格歷史 Adapter (直接使用 yfinance)"""

    def __init__(self, period: str = PRICE_HISTORY_PERIOD) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._period = period

    def get_price_history(self, symbol: str) -> PriceSeriesDTO:
        """取得日線資料並剔除缺值/非正值 K 棒"""
        yahoo_symbol = to_yahoo_symbol(symbol)
        try:
            df = yf.Ticker(yahoo_symbol).history(
                period=self._period, interval="1d", auto_adjust=False
            )
        except Exception as e:
            raise StockDataUnavailableError(symbol, f"yfinance: {e}") from e

        if df.empty:
            raise StockDataUnavailableError(symbol, f"{yahoo_symbol} 無歷史價格")

        bars: list[PriceBarDTO] = []
        for idx, row in df.iterrows():
            bars.append(
                {
                    "date": idx.strftime("%Y-%m-%d"),
                    "close": float(row["Close"]),
                    "high": float(row["High"]),
                    "low": float(row["Low"]),
                }
            )

        series = clean_price_bars(bars)
        dropped = len(bars) - len(series["close"])
        if dropped:
            self._logger.debug(f"{yahoo_symbol} 剔除 {dropped} 根無效 K 棒")
        if not series["close"]:
            raise StockDataUnavailableError(symbol, f"{yahoo_symbol} 無有效價格")
        return series

    def get_current_price(self, symbol: str) -> float | None:
        """取得現價 (最新一筆收盤)"""
        yahoo_symbol = to_yahoo_symbol(symbol)
        try:
            hist = yf.Ticker(yahoo_symbol).history(period="1d", auto_adjust=False)
        except Exception as e:
            self._logger.warning(f"{yahoo_symbol} 取得現價失敗: {e}")
            return None

        if hist.empty:
            return None
        price = float(hist["Close"].iloc[-1])
        return price if price > 0 else None
