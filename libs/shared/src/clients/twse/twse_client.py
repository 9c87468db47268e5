"""
證交所客戶端

從 BWIBBU_d (個股日本益比、殖利率及股價淨值比) 取得評價指標。
"""

import logging
from datetime import date

import requests

from libs.shared.src.constants.request_settings import HTTP_TIMEOUT_SECONDS
from libs.shared.src.dtos.screening.twse_valuation_dto import TwseValuationDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class TwseClient:
    """證交所客戶端"""

    BWIBBU_URL = "https://www.twse.com.tw/exchangeReport/BWIBBU_d"

    # BWIBBU_d 欄位 (依名稱查找，找不到時使用預設位置)
    FIELD_CODE = ("證券代號", 0)
    FIELD_NAME = ("證券名稱", 1)
    FIELD_YIELD = ("殖利率(%)", 2)
    FIELD_PE = ("本益比", 4)
    FIELD_PB = ("股價淨值比", 5)

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._session = session or requests.Session()
        self._timeout = timeout

    def get_valuation(
        self, stock_no: str, on_date: date | None = None
    ) -> TwseValuationDTO | None:
        """取得個股評價指標

        Args:
            stock_no: 股票代碼 (例如 2330)
            on_date: 查詢日期 (預設今天)

        Returns:
            TwseValuationDTO，若當日無該股資料則回傳 None

        Raises:
            StockDataUnavailableError: 網路錯誤或回應格式錯誤
        """
        query_date = (on_date or date.today()).strftime("%Y%m%d")
        params = {
            "response": "json",
            "date": query_date,
            "stockNo": stock_no,
            "selectType": "ALL",
        }

        try:
            response = self._session.get(
                self.BWIBBU_URL, params=params, timeout=self._timeout
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise StockDataUnavailableError(stock_no, f"TWSE BWIBBU_d: {e}") from e
        except ValueError as e:
            raise StockDataUnavailableError(
                stock_no, "TWSE BWIBBU_d 回應無法解析"
            ) from e

        fields: list[str] = payload.get("fields") or []
        rows: list[list] = payload.get("data") or []

        code_idx = self._field_index(fields, self.FIELD_CODE)
        for row in rows:
            if str(row[code_idx]).strip() != stock_no:
                continue
            return {
                "stock_no": stock_no,
                "name": str(row[self._field_index(fields, self.FIELD_NAME)]).strip(),
                "dividend_yield": parse_twse_number(
                    row[self._field_index(fields, self.FIELD_YIELD)]
                ),
                "pe_ratio": parse_twse_number(
                    row[self._field_index(fields, self.FIELD_PE)]
                ),
                "pb_ratio": parse_twse_number(
                    row[self._field_index(fields, self.FIELD_PB)]
                ),
            }

        self._logger.debug(f"BWIBBU_d {query_date} 無 {stock_no} 資料")
        return None

    @staticmethod
    def _field_index(fields: list[str], field: tuple[str, int]) -> int:
        name, default_index = field
        if name in fields:
            return fields.index(name)
        return default_index


def parse_twse_number(raw: object) -> float | None:
    """Parse a TWSE numeric cell ("1,234.5", "-", "") into float"""
    text = str(raw).replace(",", "").strip()
    if not text or text in ("-", "--", "N/A"):
        return None
    try:
        return float(text)
    except ValueError:
        return None
