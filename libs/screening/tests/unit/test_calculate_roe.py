"""CalculateRoeQuery 單元測試"""

from datetime import date

import pytest

from libs.screening.src.adapters.driven.memory.financial_statement_fake_adapter import (
    FinancialStatementFakeAdapter,
)
from libs.screening.src.application.queries.calculate_roe import CalculateRoeQuery
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class TestCalculateRoeQuery:
    """測試 ROE 計算"""

    @pytest.fixture
    def statements(self) -> FinancialStatementFakeAdapter:
        adapter = FinancialStatementFakeAdapter()
        adapter.set_components("2330", net_income=1_000.0, equity=4_000.0)
        adapter.set_annual_roe("2330", 2022, 39.6)
        adapter.set_annual_roe("2330", 2024, 30.3)
        return adapter

    @pytest.fixture
    def query(self, statements) -> CalculateRoeQuery:
        return CalculateRoeQuery(statements=statements, clock=lambda: date(2025, 5, 1))

    def test_latest_roe(self, query) -> None:
        report = query.execute("2330")

        assert report["symbol"] == "2330"
        assert report["latest"]["roe"] == pytest.approx(25.0)
        assert report["latest"]["equity"] == 4_000.0

    def test_historical_skips_missing_years(self, query) -> None:
        """缺資料的年度略過，由舊到新"""
        report = query.execute("2330.TW", years=3)

        assert report["historical"] == [
            {"year": 2022, "roe": 39.6},
            {"year": 2024, "roe": 30.3},
        ]

    def test_zero_years(self, query) -> None:
        assert query.execute("2330", years=0)["historical"] == []

    def test_missing_statements_raise(self, query) -> None:
        with pytest.raises(StockDataUnavailableError):
            query.execute("1101")
