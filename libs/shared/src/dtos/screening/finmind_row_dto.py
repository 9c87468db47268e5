"""FinMind Dataset Row DTOs"""

from typing import NotRequired, TypedDict


class FinMindStatementRowDTO(TypedDict):
    """Row of TaiwanStockFinancialStatements / TaiwanStockBalanceSheet"""

    date: str  # Quarter end, YYYY-MM-DD
    stock_id: str
    type: str
    value: float
    origin_name: str


class FinMindDividendRowDTO(TypedDict):
    """Row of TaiwanStockDividend (only the fields in use)"""

    date: str
    stock_id: str
    CashEarningsDistribution: NotRequired[float]
    CashStatutorySurplus: NotRequired[float]


class FinMindResponseDTO(TypedDict):
    """FinMind API v4 envelope"""

    msg: str
    status: NotRequired[int]
    data: list[dict]
