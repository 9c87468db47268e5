"""ROE Report DTO"""

from typing import TypedDict


class RoeComponentsDTO(TypedDict):
    """ROE with the statement figures it was derived from"""

    roe: float  # %
    net_income: float  # Trailing net income (TWD)
    equity: float  # Shareholder equity (TWD)


class AnnualRoeDTO(TypedDict):
    """ROE of a calendar year"""

    year: int
    roe: float


class RoeReportDTO(TypedDict):
    """Latest and historical ROE of one stock"""

    symbol: str
    latest: RoeComponentsDTO
    historical: list[AnnualRoeDTO]
