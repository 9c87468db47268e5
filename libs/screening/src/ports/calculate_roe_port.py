"""計算 ROE Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.screening.roe_report_dto import RoeReportDTO


class CalculateRoePort(Protocol):
    """計算最新 ROE 與歷年 ROE

    CLI Entry: screening roe
    """

    def execute(self, symbol: str, years: int = 3) -> RoeReportDTO:
        """
        計算 ROE

        Args:
            symbol: 股票代碼 (例如 2330)
            years: 歷史年數

        Returns:
            RoeReportDTO: 最新 ROE (含淨利、股東權益) 與歷年 ROE
        """
        ...
