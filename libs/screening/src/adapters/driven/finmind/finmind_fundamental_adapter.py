"""FinMind Fundamental Adapter

Implements FundamentalMetricsProviderPort and FinancialStatementProviderPort
Statements / balance sheet / dividends from FinMind, valuation ratios from
TWSE BWIBBU_d (only fetched when statements cannot give ROE)
"""

import logging
from datetime import date, timedelta
from typing import Callable

from libs.screening.src.domain.services.financial_statement_analyzer import (
    EQUITY_ITEMS,
    NET_INCOME_ITEMS,
    build_estimator_inputs,
    build_fundamental_metrics,
    quarterly_series,
    sum_in_year,
    value_in_year,
)
from libs.screening.src.domain.services.fundamental_estimators import (
    roe_from_statements,
)
from libs.screening.src.ports.financial_statement_provider_port import (
    FinancialStatementProviderPort,
)
from libs.screening.src.ports.fundamental_metrics_provider_port import (
    FundamentalMetricsProviderPort,
)
from libs.shared.src.clients.finmind.finmind_client import FinMindClient
from libs.shared.src.clients.twse.twse_client import TwseClient
from libs.shared.src.constants.request_settings import (
    DIVIDEND_LOOKBACK_YEARS,
    STATEMENT_LOOKBACK_DAYS,
)
from libs.shared.src.dtos.screening.finmind_row_dto import FinMindStatementRowDTO
from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.dtos.screening.roe_report_dto import RoeComponentsDTO
from libs.shared.src.dtos.screening.twse_valuation_dto import TwseValuationDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)

# TWSE has no BWIBBU_d on holidays; walk back this many days at most
VALUATION_LOOKBACK_DAYS = 5


class FinMindFundamentalAdapter(
    FundamentalMetricsProviderPort, FinancialStatementProviderPort
):
    """FinMind 基本面 Adapter"""

    def __init__(
        self,
        client: FinMindClient,
        twse_client: TwseClient | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._client = client
        self._twse_client = twse_client
        self._clock = clock

    def _get_statements(self, symbol: str, start: date) -> list[FinMindStatementRowDTO]:
        return self._client.get_dataset(
            FinMindClient.FINANCIAL_STATEMENTS, symbol, start.isoformat()
        )

    def _get_balance_sheet(self, symbol: str, start: date) -> list[FinMindStatementRowDTO]:
        return self._client.get_dataset(
            FinMindClient.BALANCE_SHEET, symbol, start.isoformat()
        )

    def _get_recent_valuation(self, symbol: str) -> TwseValuationDTO | None:
        """取得最近交易日的本益比/股價淨值比"""
        if self._twse_client is None:
            return None

        today = self._clock()
        for offset in range(VALUATION_LOOKBACK_DAYS + 1):
            try:
                valuation = self._twse_client.get_valuation(
                    symbol, today - timedelta(days=offset)
                )
            except StockDataUnavailableError as e:
                self._logger.warning(f"{symbol} 評價指標取得失敗: {e.message}")
                return None
            if valuation is not None:
                return valuation
        return None

    def get_fundamental_metrics(self, symbol: str) -> FundamentalMetricsDTO:
        """取得篩選用基本面指標"""
        today = self._clock()
        start = today - timedelta(days=STATEMENT_LOOKBACK_DAYS)

        statements = self._get_statements(symbol, start)
        if not statements:
            raise StockDataUnavailableError(symbol, "FinMind 無財報資料")
        balance_sheet = self._get_balance_sheet(symbol, start)
        dividends = self._client.get_dataset(
            FinMindClient.DIVIDEND,
            symbol,
            date(today.year - DIVIDEND_LOOKBACK_YEARS, 1, 1).isoformat(),
        )

        valuation = None
        if roe_from_statements(build_estimator_inputs(statements, balance_sheet, None)) is None:
            valuation = self._get_recent_valuation(symbol)

        metrics, sources = build_fundamental_metrics(
            symbol, statements, balance_sheet, dividends, valuation, today.year
        )
        self._logger.debug(
            f"{symbol} ROE 來源={sources['roe']}, 負債比來源={sources['debt_ratio']}"
        )
        return metrics

    def get_roe_components(self, symbol: str) -> RoeComponentsDTO:
        """ROE = 近四季淨利 / 股東權益 × 100"""
        start = self._clock() - timedelta(days=STATEMENT_LOOKBACK_DAYS)
        inputs = build_estimator_inputs(
            self._get_statements(symbol, start),
            self._get_balance_sheet(symbol, start),
            None,
        )

        net_income = inputs.get("net_income_ttm")
        equity = inputs.get("equity")
        if net_income is None:
            raise StockDataUnavailableError(symbol, "未找到淨利數據")
        if equity is None:
            raise StockDataUnavailableError(symbol, "未找到股東權益數據")
        if equity <= 0:
            raise StockDataUnavailableError(symbol, "股東權益為零")

        roe = roe_from_statements(inputs)
        self._logger.info(
            f"股票 {symbol} ROE計算: 淨利={net_income:.0f}, 股東權益={equity:.0f}, ROE={roe:.2f}%"
        )
        return {"roe": roe, "net_income": net_income, "equity": equity}

    def get_annual_roe(self, symbol: str, year: int) -> float | None:
        """年度淨利合計 / 年底股東權益 × 100"""
        start = date(year, 1, 1)
        net_income = sum_in_year(
            quarterly_series(self._get_statements(symbol, start), NET_INCOME_ITEMS),
            year,
        )
        equity = value_in_year(
            quarterly_series(self._get_balance_sheet(symbol, start), EQUITY_ITEMS),
            year,
        )
        if net_income is None or equity is None or equity <= 0:
            return None
        return net_income / equity * 100
