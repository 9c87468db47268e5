"""基本面 Fake Adapter

實作 FundamentalMetricsProviderPort，用於測試
"""

from libs.screening.src.ports.fundamental_metrics_provider_port import (
    FundamentalMetricsProviderPort,
)
from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class FundamentalMetricsFakeAdapter(FundamentalMetricsProviderPort):
    """基本面 Fake Adapter"""

    def __init__(self) -> None:
        self._metrics: dict[str, FundamentalMetricsDTO] = {}
        self.requested: list[str] = []

    def set_metrics(self, symbol: str, metrics: FundamentalMetricsDTO) -> None:
        """設置基本面指標（測試用）"""
        self._metrics[symbol] = metrics

    def get_fundamental_metrics(self, symbol: str) -> FundamentalMetricsDTO:
        self.requested.append(symbol)
        if symbol not in self._metrics:
            raise StockDataUnavailableError(symbol, "無財報資料")
        return self._metrics[symbol]
