"""FinMindFundamentalAdapter 單元測試"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from libs.screening.src.adapters.driven.finmind.finmind_fundamental_adapter import (
    FinMindFundamentalAdapter,
)
from libs.shared.src.clients.finmind.finmind_client import FinMindClient
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)

QUARTERS = ["2024-03-31", "2024-06-30", "2024-09-30", "2024-12-31"]


def rows(item: str, values: list[float], dates: list[str] = QUARTERS) -> list[dict]:
    return [
        {"date": d, "stock_id": "2330", "type": item, "value": v, "origin_name": ""}
        for d, v in zip(dates, values)
    ]


def make_client(statements: list[dict], balance_sheet: list[dict], dividends=None) -> MagicMock:
    datasets = {
        FinMindClient.FINANCIAL_STATEMENTS: statements,
        FinMindClient.BALANCE_SHEET: balance_sheet,
        FinMindClient.DIVIDEND: dividends or [],
    }
    client = MagicMock(spec=FinMindClient)
    client.get_dataset.side_effect = lambda dataset, data_id, start_date: datasets[dataset]
    return client


class TestGetFundamentalMetrics:
    """測試基本面指標"""

    def test_statements_skip_valuation_lookup(self) -> None:
        """財報可算 ROE 時不查詢證交所"""
        client = make_client(
            rows("EPS", [2.0] * 4) + rows("IncomeAfterTaxes", [25.0] * 4),
            rows("Equity", [500.0], ["2024-12-31"]),
        )
        twse = MagicMock()
        adapter = FinMindFundamentalAdapter(client, twse, clock=lambda: date(2025, 3, 1))

        metrics = adapter.get_fundamental_metrics("2330")

        assert metrics["roe"] == pytest.approx(20.0)
        assert metrics["eps"] == pytest.approx(8.0)
        twse.get_valuation.assert_not_called()

    def test_valuation_walks_back_to_trading_day(self) -> None:
        """假日無資料時往前一天查詢"""
        client = make_client(rows("EPS", [2.0] * 4), [])
        twse = MagicMock()
        twse.get_valuation.side_effect = [
            None,
            {"stock_no": "2330", "name": "台積電", "dividend_yield": 1.5, "pe_ratio": 20.0, "pb_ratio": 5.0},
        ]
        adapter = FinMindFundamentalAdapter(client, twse, clock=lambda: date(2025, 3, 2))

        metrics = adapter.get_fundamental_metrics("2330")

        assert metrics["roe"] == pytest.approx(25.0)
        assert twse.get_valuation.call_args_list[1].args == ("2330", date(2025, 3, 1))

    def test_valuation_failure_is_tolerated(self) -> None:
        """證交所失敗時仍嘗試其他估算方式，最終無法估算則拋出"""
        client = make_client(rows("EPS", [2.0] * 4), [])
        twse = MagicMock()
        twse.get_valuation.side_effect = StockDataUnavailableError("2330", "timeout")
        adapter = FinMindFundamentalAdapter(client, twse, clock=lambda: date(2025, 3, 2))

        with pytest.raises(StockDataUnavailableError):
            adapter.get_fundamental_metrics("2330")

    def test_no_statements(self) -> None:
        adapter = FinMindFundamentalAdapter(make_client([], []))

        with pytest.raises(StockDataUnavailableError):
            adapter.get_fundamental_metrics("2330")


class TestRoeComponents:
    """測試 ROE 計算"""

    def test_trailing_net_income_over_equity(self) -> None:
        client = make_client(
            rows("IncomeAfterTaxes", [30.0, 20.0, 25.0, 25.0]),
            rows("Equity", [400.0, 500.0], ["2024-06-30", "2024-12-31"]),
        )
        adapter = FinMindFundamentalAdapter(client, clock=lambda: date(2025, 3, 1))

        components = adapter.get_roe_components("2330")

        assert components == {"roe": pytest.approx(20.0), "net_income": 100.0, "equity": 500.0}

    def test_missing_net_income(self) -> None:
        client = make_client([], rows("Equity", [500.0], ["2024-12-31"]))
        adapter = FinMindFundamentalAdapter(client)

        with pytest.raises(StockDataUnavailableError):
            adapter.get_roe_components("2330")

    def test_annual_roe(self) -> None:
        client = make_client(
            rows("IncomeAfterTaxes", [10.0, 10.0, 10.0, 10.0]),
            rows("Equity", [200.0, 400.0], ["2024-06-30", "2024-12-31"]),
        )
        adapter = FinMindFundamentalAdapter(client)

        assert adapter.get_annual_roe("2330", 2024) == pytest.approx(10.0)
        assert adapter.get_annual_roe("2330", 2023) is None
