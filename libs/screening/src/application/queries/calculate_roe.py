"""計算 ROE Query

實作 CalculateRoePort Driving Port
"""

import logging
from datetime import date
from typing import Callable

from injector import inject

from libs.screening.src.domain.services.symbol_converter import to_internal_symbol
from libs.screening.src.ports.calculate_roe_port import CalculateRoePort
from libs.screening.src.ports.financial_statement_provider_port import (
    FinancialStatementProviderPort,
)
from libs.shared.src.dtos.screening.roe_report_dto import (
    AnnualRoeDTO,
    RoeReportDTO,
)


class CalculateRoeQuery(CalculateRoePort):
    """最新 ROE 與歷年 ROE"""

    @inject
    def __init__(
        self,
        statements: FinancialStatementProviderPort,
        clock: Callable[[], date] = date.today,
    ):
        self._logger = logging.getLogger(self.__class__.__name__)
        self._statements = statements
        self._clock = clock

    def execute(self, symbol: str, years: int = 3) -> RoeReportDTO:
        symbol = to_internal_symbol(str(symbol))
        latest = self._statements.get_roe_components(symbol)

        # 由舊到新，不含尚未結束的今年
        current_year = self._clock().year
        historical: list[AnnualRoeDTO] = []
        for year in range(current_year - years, current_year):
            roe = self._statements.get_annual_roe(symbol, year)
            if roe is None:
                self._logger.debug(f"{symbol} {year} 年 ROE 資料不足")
                continue
            historical.append({"year": year, "roe": roe})

        return {"symbol": symbol, "latest": latest, "historical": historical}
