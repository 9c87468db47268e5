from abc import ABC, abstractmethod

from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)


class FundamentalMetricsProviderPort(ABC):
    """基本面指標 Port"""

    @abstractmethod
    def get_fundamental_metrics(self, symbol: str) -> FundamentalMetricsDTO:
        """取得篩選用基本面指標

        缺值由 Adapter 依預設值政策補齊，篩選引擎不做任何補值

        Raises:
            StockDataUnavailableError: EPS 缺漏或 ROE 無法估算
        """
        pass
