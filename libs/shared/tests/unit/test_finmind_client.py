"""
FinMindClient Unit Tests

Tests request building and error wrapping with a mocked session.
"""

from unittest.mock import MagicMock

import pytest
import requests

from libs.shared.src.clients.finmind.finmind_client import FinMindClient
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


def make_session(payload=None, error: Exception | None = None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value.json.return_value = payload
    return session


class TestGetDataset:
    """Test get_dataset method"""

    def test_returns_data_rows(self, monkeypatch) -> None:
        """Test data rows are returned"""
        monkeypatch.delenv("FINMIND_API_TOKEN", raising=False)
        rows = [{"date": "2024-12-31", "stock_id": "2330", "type": "EPS", "value": 14.45}]
        session = make_session({"msg": "success", "status": 200, "data": rows})
        client = FinMindClient(token="", session=session)

        result = client.get_dataset(FinMindClient.FINANCIAL_STATEMENTS, "2330", "2022-01-01")

        assert result == rows
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {
            "dataset": "TaiwanStockFinancialStatements",
            "data_id": "2330",
            "start_date": "2022-01-01",
        }
        assert "Authorization" not in kwargs["headers"]

    def test_token_sent_as_bearer(self) -> None:
        """Test token is sent in the Authorization header"""
        session = make_session({"msg": "success", "status": 200, "data": []})
        client = FinMindClient(token="abc", session=session)

        client.get_dataset(FinMindClient.DIVIDEND, "2330", "2010-01-01")

        _, kwargs = session.get.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer abc"

    def test_token_from_environment(self, monkeypatch) -> None:
        """Test FINMIND_API_TOKEN is used when no token is given"""
        monkeypatch.setenv("FINMIND_API_TOKEN", "env-token")
        session = make_session({"msg": "success", "status": 200, "data": []})

        FinMindClient(session=session).get_dataset(FinMindClient.BALANCE_SHEET, "2330", "2022-01-01")

        _, kwargs = session.get.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer env-token"

    def test_api_error_status_raises(self) -> None:
        """Test non-200 status in payload raises"""
        session = make_session({"msg": "Requests reach the upper limit", "status": 402})
        client = FinMindClient(token="", session=session)

        with pytest.raises(StockDataUnavailableError) as exc_info:
            client.get_dataset(FinMindClient.DIVIDEND, "2330", "2010-01-01")
        assert "upper limit" in exc_info.value.message

    def test_network_error_raises(self) -> None:
        """Test requests exceptions are wrapped"""
        session = make_session(error=requests.ConnectionError("down"))
        client = FinMindClient(token="", session=session)

        with pytest.raises(StockDataUnavailableError):
            client.get_dataset(FinMindClient.DIVIDEND, "2330", "2010-01-01")

    def test_invalid_json_raises(self) -> None:
        """Test unparsable body is wrapped"""
        session = make_session()
        session.get.return_value.json.side_effect = ValueError("no json")
        client = FinMindClient(token="", session=session)

        with pytest.raises(StockDataUnavailableError):
            client.get_dataset(FinMindClient.DIVIDEND, "2330", "2010-01-01")
