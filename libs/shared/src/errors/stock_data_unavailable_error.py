"""Stock Data Unavailable Error"""

from libs.shared.src.errors.domain_error import DomainError


class StockDataUnavailableError(DomainError):
    """Stock data unavailable error

    Raised by fetch adapters when price history or fundamentals cannot be
    retrieved or parsed (HTTP failure, empty history, missing EPS, ...).
    The screening engine is not invoked for such a stock.
    """

    def __init__(self, symbol: str, reason: str | None = None) -> None:
        message = f"無法取得 {symbol} 的資料"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="STOCK_DATA_UNAVAILABLE")
        self.symbol = symbol
        self.reason = reason
