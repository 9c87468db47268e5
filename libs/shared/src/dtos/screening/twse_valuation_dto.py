"""TWSE Valuation DTO"""

from typing import TypedDict


class TwseValuationDTO(TypedDict):
    """Daily valuation ratios from TWSE BWIBBU_d"""

    stock_no: str
    name: str
    dividend_yield: float | None  # %
    pe_ratio: float | None
    pb_ratio: float | None
