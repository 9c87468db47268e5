from abc import ABC, abstractmethod

from libs.shared.src.dtos.screening.roe_report_dto import RoeComponentsDTO


class FinancialStatementProviderPort(ABC):
    """財報 ROE 計算 Port"""

    @abstractmethod
    def get_roe_components(self, symbol: str) -> RoeComponentsDTO:
        """以近四季淨利 / 股東權益計算最新 ROE

        Raises:
            StockDataUnavailableError: 缺少淨利或股東權益
        """
        pass

    @abstractmethod
    def get_annual_roe(self, symbol: str, year: int) -> float | None:
        """計算指定年度 ROE (資料不足時回傳 None)"""
        pass
