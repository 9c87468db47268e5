"""Estimator Inputs DTO"""

from typing import TypedDict


class EstimatorInputsDTO(TypedDict, total=False):
    """Raw figures available to the ROE / debt-ratio estimator chains

    Every field is optional; an estimator returns None when its inputs
    are missing.
    """

    net_income_ttm: float | None  # Trailing four-quarter net income
    equity: float | None  # Latest shareholder equity
    total_assets: float | None
    liabilities: float | None
    pe_ratio: float | None  # TWSE P/E
    pb_ratio: float | None  # TWSE P/B
