"""財報 ROE Fake Adapter

實作 FinancialStatementProviderPort，用於測試
"""

from libs.screening.src.ports.financial_statement_provider_port import (
    FinancialStatementProviderPort,
)
from libs.shared.src.dtos.screening.roe_report_dto import RoeComponentsDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class FinancialStatementFakeAdapter(FinancialStatementProviderPort):
    """財報 ROE Fake Adapter"""

    def __init__(self) -> None:
        self._components: dict[str, RoeComponentsDTO] = {}
        self._annual: dict[tuple[str, int], float] = {}

    def set_components(self, symbol: str, net_income: float, equity: float) -> None:
        """設置淨利與股東權益（測試用）"""
        self._components[symbol] = {
            "roe": net_income / equity * 100,
            "net_income": net_income,
            "equity": equity,
        }

    def set_annual_roe(self, symbol: str, year: int, roe: float) -> None:
        """設置年度 ROE（測試用）"""
        self._annual[(symbol, year)] = roe

    def get_roe_components(self, symbol: str) -> RoeComponentsDTO:
        if symbol not in self._components:
            raise StockDataUnavailableError(symbol, "未找到淨利數據")
        return self._components[symbol]

    def get_annual_roe(self, symbol: str, year: int) -> float | None:
        return self._annual.get((symbol, year))
