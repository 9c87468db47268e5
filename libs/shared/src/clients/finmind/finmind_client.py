"""
FinMind 客戶端

透過 FinMind Open API v4 取得台股財報、資產負債表與股利資料。
"""

import logging
import os

import requests

from libs.shared.src.constants.request_settings import HTTP_TIMEOUT_SECONDS
from libs.shared.src.dtos.screening.finmind_row_dto import FinMindResponseDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class FinMindClient:
    """FinMind 客戶端"""

    BASE_URL = "https://api.finmindtrade.com/api/v4/data"

    FINANCIAL_STATEMENTS = "TaiwanStockFinancialStatements"
    BALANCE_SHEET = "TaiwanStockBalanceSheet"
    DIVIDEND = "TaiwanStockDividend"

    def __init__(
        self,
        token: str | None = None,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        """初始化客戶端

        Args:
            token: FinMind API token (未提供時讀取 FINMIND_API_TOKEN，可為空)
            session: requests Session (測試可注入)
            timeout: HTTP 逾時秒數
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._token = token or os.environ.get("FINMIND_API_TOKEN", "")
        self._session = session or requests.Session()
        self._timeout = timeout

    def get_dataset(self, dataset: str, data_id: str, start_date: str) -> list[dict]:
        """取得指定資料集

        Args:
            dataset: FinMind 資料集名稱
            data_id: 股票代碼 (例如 2330)
            start_date: 起始日期 (YYYY-MM-DD)

        Returns:
            list[dict]: 資料列

        Raises:
            StockDataUnavailableError: 網路錯誤或 API 回傳失敗
        """
        params = {"dataset": dataset, "data_id": data_id, "start_date": start_date}
        headers = {}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        try:
            response = self._session.get(
                self.BASE_URL, params=params, headers=headers, timeout=self._timeout
            )
            response.raise_for_status()
            payload: FinMindResponseDTO = response.json()
        except requests.RequestException as e:
            raise StockDataUnavailableError(data_id, f"FinMind {dataset}: {e}") from e
        except ValueError as e:
            raise StockDataUnavailableError(
                data_id, f"FinMind {dataset} 回應無法解析"
            ) from e

        status = payload.get("status", 200)
        if status != 200:
            raise StockDataUnavailableError(
                data_id, f"FinMind {dataset}: {payload.get('msg', status)}"
            )

        data = payload.get("data") or []
        self._logger.debug(f"{dataset} {data_id}: {len(data)} rows")
        return data
