"""財報分析單元測試"""

import pytest

from libs.screening.src.domain.services.financial_statement_analyzer import (
    build_fundamental_metrics,
    consecutive_dividend_years,
    growth_pct,
    quarterly_series,
    REVENUE_ITEMS,
)
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)

QUARTERS_2023 = ["2023-03-31", "2023-06-30", "2023-09-30", "2023-12-31"]
QUARTERS_2024 = ["2024-03-31", "2024-06-30", "2024-09-30", "2024-12-31"]


def rows(item: str, values: dict[str, float]) -> list[dict]:
    return [
        {"date": d, "stock_id": "2330", "type": item, "value": v, "origin_name": ""}
        for d, v in values.items()
    ]


@pytest.fixture
def statements() -> list[dict]:
    """兩年季報: 營收 100 → 120、EPS 1.0 → 1.5、淨利 25"""
    return (
        rows("Revenue", {**dict.fromkeys(QUARTERS_2023, 100.0), **dict.fromkeys(QUARTERS_2024, 120.0)})
        + rows("EPS", {**dict.fromkeys(QUARTERS_2023, 1.0), **dict.fromkeys(QUARTERS_2024, 1.5)})
        + rows("IncomeAfterTaxes", dict.fromkeys(QUARTERS_2024, 25.0))
    )


@pytest.fixture
def balance_sheet() -> list[dict]:
    return (
        rows("TotalAssets", {"2024-12-31": 1000.0})
        + rows("Liabilities", {"2024-12-31": 400.0})
        + rows("Equity", {"2024-12-31": 500.0})
    )


@pytest.fixture
def dividends() -> list[dict]:
    return [
        {"date": f"{year}-07-01", "stock_id": "2330", "CashEarningsDistribution": 5.0}
        for year in range(2020, 2025)
    ]


class TestQuarterlySeries:
    """測試科目擷取"""

    def test_prefers_first_listed_item(self) -> None:
        data = [
            {"date": "2024-03-31", "stock_id": "2330", "type": "X", "value": 90.0, "origin_name": "營業收入"},
            {"date": "2024-03-31", "stock_id": "2330", "type": "Revenue", "value": 100.0, "origin_name": ""},
        ]
        assert quarterly_series(data, REVENUE_ITEMS) == [("2024-03-31", 100.0)]

    def test_sorted_oldest_first(self) -> None:
        data = rows("Revenue", {"2024-06-30": 2.0, "2024-03-31": 1.0})
        assert quarterly_series(data, REVENUE_ITEMS) == [("2024-03-31", 1.0), ("2024-06-30", 2.0)]

    def test_growth_pct_uses_absolute_base(self) -> None:
        assert growth_pct(-5.0, -10.0) == pytest.approx(50.0)
        assert growth_pct(5.0, 0.0) is None


class TestDividendYears:
    """測試連續配息年數"""

    def test_consecutive_streak(self, dividends) -> None:
        assert consecutive_dividend_years(dividends, 2025) == 5

    def test_gap_breaks_streak(self) -> None:
        data = [
            {"date": f"{y}-07-01", "stock_id": "2330", "CashEarningsDistribution": 1.0}
            for y in (2021, 2023, 2024)
        ]
        assert consecutive_dividend_years(data, 2025) == 2

    def test_stale_history_counts_zero(self) -> None:
        data = [{"date": "2022-07-01", "stock_id": "2330", "CashEarningsDistribution": 1.0}]
        assert consecutive_dividend_years(data, 2025) == 0

    def test_statutory_surplus_counts_as_cash(self) -> None:
        data = [{"date": "2024-07-01", "stock_id": "2330", "CashStatutorySurplus": 0.5}]
        assert consecutive_dividend_years(data, 2025) == 1


class TestBuildFundamentalMetrics:
    """測試基本面指標組裝"""

    def test_full_statements(self, statements, balance_sheet, dividends) -> None:
        metrics, sources = build_fundamental_metrics(
            "2330", statements, balance_sheet, dividends, None, 2025
        )

        assert metrics["eps"] == pytest.approx(6.0)
        assert metrics["eps_growth"] == pytest.approx(50.0)
        assert metrics["yoy_growth"] == pytest.approx(20.0)
        assert metrics["revenue_growth"] == pytest.approx(20.0)
        assert metrics["roe"] == pytest.approx(20.0)
        assert metrics["debt_ratio"] == pytest.approx(40.0)
        assert metrics["dividend_years"] == 5
        assert sources == {"roe": "statements", "debt_ratio": "liabilities"}

    def test_revenue_growth_falls_back_to_yoy(self, balance_sheet) -> None:
        """不足 8 季時營收成長改用年增率"""
        statements = rows(
            "Revenue", {"2023-12-31": 100.0, **dict.fromkeys(QUARTERS_2024, 130.0)}
        ) + rows("EPS", dict.fromkeys(QUARTERS_2024, 1.0))

        metrics, _ = build_fundamental_metrics(
            "2330", statements, balance_sheet, [], {"stock_no": "2330", "name": "台積電", "dividend_yield": 2.0, "pe_ratio": 10.0, "pb_ratio": 2.0}, 2025
        )

        assert metrics["revenue_growth"] == pytest.approx(30.0)
        assert metrics["yoy_growth"] == pytest.approx(30.0)

    def test_defaults_for_missing_fields(self) -> None:
        """缺值依預設值補齊"""
        statements = rows("EPS", {"2024-12-31": 2.0})
        valuation = {"stock_no": "2330", "name": "台積電", "dividend_yield": None, "pe_ratio": 30.0, "pb_ratio": None}

        metrics, sources = build_fundamental_metrics(
            "2330", statements, [], [], valuation, 2025
        )

        assert metrics == {
            "roe": 10.0,
            "revenue_growth": 0.0,
            "yoy_growth": 0.0,
            "eps_growth": 0.0,
            "eps": 2.0,
            "debt_ratio": 50.0,
            "dividend_years": 0,
        }
        assert sources == {"roe": "pe_tier", "debt_ratio": "default"}

    def test_missing_eps_raises(self, balance_sheet) -> None:
        statements = rows("Revenue", dict.fromkeys(QUARTERS_2024, 120.0))
        with pytest.raises(StockDataUnavailableError):
            build_fundamental_metrics("2330", statements, balance_sheet, [], None, 2025)

    def test_unestimable_roe_raises(self) -> None:
        statements = rows("EPS", dict.fromkeys(QUARTERS_2024, 1.0))
        with pytest.raises(StockDataUnavailableError):
            build_fundamental_metrics("2330", statements, [], [], None, 2025)
